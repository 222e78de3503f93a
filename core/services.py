"""Business orchestration for the portal.

Each screen action is load → ledger operation → save of the whole document.
Mutations run in @transaction.atomic and load the document with a row lock on
its storage key, so concurrent workers write one at a time.
"""
import logging

from django.db import transaction

from . import ledger
from .adapters.payment_adapter import PaymentAdapter
from .exceptions import NotFound, Unauthorized
from .ledger import Account, Administrator, Document
from .store import PersistentStore

logger = logging.getLogger(__name__)


class PortalServices:
	"""Portal operations over an injected PersistentStore."""

	def __init__(self, store: PersistentStore | None = None):
		self.store = store or PersistentStore()


	def overview(self) -> Document:
		"""
		The current document (user list for the admin panel)
		"""
		return self.store.load()


	def find(self, uid) -> Account | None:
		return ledger.find_by_id(self.store.load(), uid)


	@transaction.atomic
	def register(self, name, mobile, account_type) -> Account:
		"""
		Create a pending account; it activates once its wallet covers the price.
		"""
		document = self.store.load(for_update=True)
		account, document = ledger.register(document, name, mobile, account_type)
		self.store.save(document)
		logger.info(
			"Registered %s account %s, price %s",
			account.type, account.id, account.price,
			extra={"uid": account.id, "operation": "register", "status": str(account.status)},
		)
		return account


	def login(self, uid) -> Account:
		"""
		Look an account up by UID. Pending accounts are returned too; the caller
		tells the user to recharge.
		"""
		account = self.find(uid)
		if account is None:
			raise NotFound(uid)
		return account


	@transaction.atomic
	def top_up(self, uid, amount, operation: str = "top_up") -> Account:
		"""
		Credit the wallet by `amount` and return the updated account.
		"""
		document = self.store.load(for_update=True)
		before = ledger.find_by_id(document, uid)
		document = ledger.top_up(document, uid, amount)
		self.store.save(document)

		account = ledger.find_by_id(document, uid)
		logger.info(
			"Wallet of %s credited to %s",
			uid, account.wallet,
			extra={"uid": uid, "operation": operation, "status": str(account.status)},
		)
		if account.is_active and not before.is_active:
			logger.info("Account %s activated", uid, extra={"uid": uid, "operation": operation})
		return account


	def admin_credit(self, uid, amount) -> Account:
		"""
		Admin credit: the same mutation as a user top-up.
		"""
		return self.top_up(uid, amount, operation="admin_credit")


	@transaction.atomic
	def simulate_payment(self, uid) -> Account:
		"""
		"I have paid": top up by the account's own price.
		"""
		document = self.store.load(for_update=True)
		document = ledger.simulate_payment(document, uid)
		self.store.save(document)
		account = ledger.find_by_id(document, uid)
		logger.info(
			"Simulated UPI payment for %s, wallet %s",
			uid, account.wallet,
			extra={"uid": uid, "operation": "simulate_payment", "status": str(account.status)},
		)
		return account


	@transaction.atomic
	def remove(self, uid) -> bool:
		"""
		Delete the account; removing an unknown UID is a no-op. Returns whether anything was removed.
		"""
		document = self.store.load(for_update=True)
		updated = ledger.remove(document, uid)
		if updated is document:
			return False
		self.store.save(updated)
		logger.info("Removed account %s", uid, extra={"uid": uid, "operation": "remove"})
		return True


	def authenticate_admin(self, username, password) -> Administrator:
		try:
			return ledger.authenticate_admin(self.store.load(), username, password)
		except Unauthorized:
			logger.warning("Failed admin login for %r", username, extra={"operation": "admin_login"})
			raise


	def payment_details(self, uid=None) -> dict:
		"""
		What the pay screen shows: the UID (defaults to the last registered one),
		the amount prefilled with that account's price, and the UPI link.
		"""
		document = self.store.load()
		uid = uid or document.last_uid or ""
		account = ledger.find_by_id(document, uid) if uid else None
		amount = account.price if account else 0
		return {
			"uid": uid,
			"amount": amount,
			"upi_id": PaymentAdapter.merchant_id(),
			"upi_link": PaymentAdapter.upi_link(amount),
		}
