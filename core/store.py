"""Persistent store for the portal document.

The document is serialized as one JSON value under a single storage key and is
always read and written whole: no partial updates, no merging.
"""
import json
import logging

from django.conf import settings

from .adapters.storage_adapter import StorageAdapter
from .exceptions import CorruptData
from .ledger import Administrator, Document, seed_document

logger = logging.getLogger(__name__)


class PersistentStore:
	"""load/save of the Document over a key-value adapter."""

	def __init__(self, adapter=None, key: str | None = None, reseed_on_corrupt: bool | None = None):
		self.adapter = adapter or StorageAdapter()
		self.key = key or getattr(settings, "PORTAL_STORAGE_KEY", "print_portal_data_v1")
		if reseed_on_corrupt is None:
			reseed_on_corrupt = getattr(settings, "PORTAL_RESEED_ON_CORRUPT", False)
		self.reseed_on_corrupt = reseed_on_corrupt

	def load(self, for_update: bool = False) -> Document:
		"""
		Return the stored Document, seeding (and writing) a fresh one if the key is empty.

		Raises CorruptData when the stored value is not a readable document,
		unless the store was configured to reseed in that case.
		"""
		raw = self.adapter.get_item(self.key, for_update=for_update)
		if raw is None:
			document = self._seed()
			if self.adapter.add_item(self.key, self._dumps(document)):
				logger.info("No document under %s, seeded", self.key)
				return document
			# another writer seeded first: read (and lock) its document instead
			raw = self.adapter.get_item(self.key, for_update=for_update)

		try:
			return Document.from_dict(json.loads(raw))
		except (ValueError, KeyError, TypeError) as e:
			if not self.reseed_on_corrupt:
				logger.error("Unreadable document under %s: %s", self.key, e, extra={"error": str(e)})
				raise CorruptData(self.key, str(e)) from e
			logger.warning("Unreadable document under %s, reseeding: %s", self.key, e, extra={"error": str(e)})
			return self._write_seed()

	def save(self, document: Document) -> None:
		"""Overwrite the stored value with the whole document."""
		self.adapter.set_item(self.key, self._dumps(document))

	def reset(self) -> None:
		"""Drop the stored value; the next load() seeds a new document."""
		self.adapter.remove_item(self.key)

	@staticmethod
	def _dumps(document: Document) -> str:
		return json.dumps(document.to_dict(), ensure_ascii=False)

	def _seed(self) -> Document:
		return seed_document(Administrator(
			username=getattr(settings, "PORTAL_ADMIN_USERNAME", "admin"),
			password=getattr(settings, "PORTAL_ADMIN_PASSWORD", "admin123"),
		))

	def _write_seed(self) -> Document:
		document = self._seed()
		self.save(document)
		return document
