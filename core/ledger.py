"""Account ledger: the portal document and the operations on it.

The whole portal state is one Document (accounts, administrator, metadata).
Every operation here takes a Document and returns a new one; nothing is
mutated in place and nothing is persisted. Persistence lives in core.store,
orchestration in core.services.

Account status only moves forward:

	pending --(wallet >= price)--> active

An account starts pending (wallet 0 is below any price) and stays active once
it got there, whatever happens to the wallet afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation

from django.db import models

from .constants import max_topup, new_uid, now_iso, price_for
from .exceptions import InvalidInput, NotFound, Unauthorized


class AccountType(models.TextChoices):
	RETAILER = "retailer", "Retailer"
	DISTRIBUTOR = "distributor", "Distributor"


class AccountStatus(models.TextChoices):
	PENDING = "pending", "Pending"
	ACTIVE = "active", "Active"


def _whole_number(value, name: str, minimum: int = 0) -> int:
	# Stored numbers must be integral; 199.0 written by an older client is accepted
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise TypeError(f"{name} must be a number, got {value!r}")
	if isinstance(value, float) and not value.is_integer():
		raise ValueError(f"{name} must be a whole number, got {value!r}")
	if value < minimum:
		raise ValueError(f"{name} must be at least {minimum}, got {value!r}")
	return int(value)


def _text(data: dict, key: str) -> str:
	value = data[key]
	if not isinstance(value, str):
		raise TypeError(f"{key} must be a string, got {value!r}")
	return value


@dataclass(frozen=True)
class Account:
	"""A registered retailer or distributor with its wallet and activation status."""

	id: str
	name: str
	mobile: str
	type: str
	price: int
	wallet: int = 0
	status: str = AccountStatus.PENDING
	created_at: str = ""

	@property
	def is_active(self) -> bool:
		return self.status == AccountStatus.ACTIVE

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"name": self.name,
			"mobile": self.mobile,
			"type": str(self.type),
			"price": self.price,
			"wallet": self.wallet,
			"status": str(self.status),
			"createdAt": self.created_at,
		}

	@classmethod
	def from_dict(cls, data: dict) -> Account:
		return cls(
			id=_text(data, "id"),
			name=_text(data, "name"),
			mobile=_text(data, "mobile"),
			type=AccountType(data["type"]),
			price=_whole_number(data["price"], "price", minimum=1),
			wallet=_whole_number(data.get("wallet", 0), "wallet"),
			status=AccountStatus(data.get("status", AccountStatus.PENDING)),
			created_at=_text(data, "createdAt"),
		)


@dataclass(frozen=True)
class Administrator:
	username: str
	password: str

	def to_dict(self) -> dict:
		return {"username": self.username, "password": self.password}

	@classmethod
	def from_dict(cls, data: dict) -> Administrator:
		return cls(username=_text(data, "username"), password=_text(data, "password"))


@dataclass(frozen=True)
class Document:
	"""
	The single persisted aggregate.

	users is newest first. last_uid only prefills the payment screen and is
	not authoritative.
	"""

	users: tuple[Account, ...] = ()
	admin: Administrator = field(default_factory=lambda: Administrator("admin", "admin123"))
	created_at: str = ""
	last_uid: str | None = None

	def to_dict(self) -> dict:
		data = {
			"users": [account.to_dict() for account in self.users],
			"admin": self.admin.to_dict(),
			"createdAt": self.created_at,
		}
		if self.last_uid is not None:
			data["lastUid"] = self.last_uid
		return data

	@classmethod
	def from_dict(cls, data: dict) -> Document:
		if not isinstance(data, dict):
			raise TypeError(f"document must be an object, got {type(data).__name__}")
		users = data["users"]
		if not isinstance(users, list):
			raise TypeError("users must be a list")
		last_uid = data.get("lastUid")
		if last_uid is not None and not isinstance(last_uid, str):
			raise TypeError(f"lastUid must be a string, got {last_uid!r}")
		return cls(
			users=tuple(Account.from_dict(row) for row in users),
			admin=Administrator.from_dict(data["admin"]),
			created_at=_text(data, "createdAt"),
			last_uid=last_uid,
		)


def seed_document(admin: Administrator) -> Document:
	"""A fresh document: no accounts, the given administrator, created now."""
	return Document(users=(), admin=admin, created_at=now_iso())


def _required(value, message: str) -> str:
	if value is None or not str(value).strip():
		raise InvalidInput(message)
	return str(value).strip()


def parse_amount(amount) -> int:
	"""
	Coerce a top-up amount (number or form string) to whole rupees.

	Negative, non-numeric, non-finite and fractional amounts are rejected, and so
	is anything above settings.MAX_TOPUP.
	"""
	if isinstance(amount, bool):
		raise InvalidInput("Amount must be a number.")
	try:
		value = Decimal(str(amount).strip())
	except InvalidOperation:
		raise InvalidInput("Amount must be a number.")
	if not value.is_finite():
		raise InvalidInput("Amount must be a number.")
	if value < 0:
		raise InvalidInput("Amount cannot be negative.")
	limit = max_topup()
	if value > limit:
		raise InvalidInput(f"Amount cannot exceed {limit}.")
	if value != value.to_integral_value():
		raise InvalidInput("Amount must be a whole number of rupees.")
	return int(value)


def register(document: Document, name, mobile, account_type) -> tuple[Account, Document]:
	"""
	Create a pending account at the front of the user list and remember its id
	as last_uid. The price is fixed from the account type now and never recomputed.
	"""
	name = _required(name, "Name and mobile required")
	mobile = _required(mobile, "Name and mobile required")
	try:
		account_type = AccountType(account_type)
	except ValueError:
		raise InvalidInput(f"Unknown account type: {account_type!r}")

	account = Account(
		id=new_uid(u.id for u in document.users),
		name=name,
		mobile=mobile,
		type=account_type,
		price=price_for(account_type),
		wallet=0,
		status=AccountStatus.PENDING,
		created_at=now_iso(),
	)
	return account, replace(document, users=(account,) + document.users, last_uid=account.id)


def find_by_id(document: Document, account_id) -> Account | None:
	for account in document.users:
		if account.id == account_id:
			return account
	return None


def top_up(document: Document, account_id, amount) -> Document:
	"""
	Add `amount` to the account's wallet and activate it once the wallet covers
	the price. Admin credits go through here too.
	"""
	account = find_by_id(document, account_id)
	if account is None:
		raise NotFound(account_id)
	value = parse_amount(amount)

	wallet = account.wallet + value
	status = AccountStatus.ACTIVE if wallet >= account.price else account.status
	updated = replace(account, wallet=wallet, status=status)
	users = tuple(updated if u.id == account_id else u for u in document.users)
	return replace(document, users=users)


def simulate_payment(document: Document, account_id) -> Document:
	"""The "I have paid" action: top up by the account's own price."""
	account = find_by_id(document, account_id)
	if account is None:
		raise NotFound(account_id, "UID not found for simulation.")
	return top_up(document, account_id, account.price)


def remove(document: Document, account_id) -> Document:
	users = tuple(u for u in document.users if u.id != account_id)
	if len(users) == len(document.users):
		return document
	return replace(document, users=users)


def authenticate_admin(document: Document, username, password) -> Administrator:
	# Plain-text comparison, as stored
	admin = document.admin
	if username == admin.username and password == admin.password:
		return admin
	raise Unauthorized()
