"""Adapter over the local storage stub.

In the browser prototype this was window.localStorage. Here we call the stub's
ORM model directly for repeatable, deterministic tests.
"""

from storage_stub.models import StorageItem


class StorageAdapter:
	"""
	getItem / setItem / removeItem over the StorageItem table.
	Values are opaque strings; every write replaces the whole value.
	"""

	provider_name = "stub-storage"


	@staticmethod
	def get_item(key: str, for_update: bool = False) -> str | None:
		"""
		Return the stored value or None. With for_update the row stays locked
		until the surrounding transaction ends.
		"""
		qs = StorageItem.objects.filter(key=key)
		if for_update:
			qs = qs.select_for_update()
		obj = qs.first()
		return obj.value if obj is not None else None


	@staticmethod
	def set_item(key: str, value: str) -> None:
		StorageItem.objects.update_or_create(key=key, defaults={"value": value})


	@staticmethod
	def add_item(key: str, value: str) -> bool:
		"""
		Store value only if the key is free. False when another writer got there first.
		"""
		_, created = StorageItem.objects.get_or_create(key=key, defaults={"value": value})
		return created


	@staticmethod
	def remove_item(key: str) -> None:
		StorageItem.objects.filter(key=key).delete()
