"""
Unit tests for the account ledger.
"""
import re
from unittest import mock

from django.test import TestCase, override_settings

from core import ledger
from core.constants import new_uid
from core.exceptions import InvalidInput, NotFound, Unauthorized
from core.ledger import Account, AccountStatus, AccountType, Administrator, Document


def _document() -> Document:
	return ledger.seed_document(Administrator("admin", "admin123"))


class RegisterTest(TestCase):
	"""Tests for account registration."""

	def test_retailer_price_and_initial_state(self):
		account, document = ledger.register(_document(), "Asha", "9990001111", "retailer")
		self.assertEqual(account.type, AccountType.RETAILER)
		self.assertEqual(account.price, 199)
		self.assertEqual(account.wallet, 0)
		self.assertEqual(account.status, AccountStatus.PENDING)
		self.assertFalse(account.is_active)
		self.assertTrue(account.created_at.endswith("Z"))

	def test_distributor_price(self):
		account, _ = ledger.register(_document(), "Ravi", "9990002222", "distributor")
		self.assertEqual(account.price, 499)
		self.assertEqual(account.status, AccountStatus.PENDING)

	def test_uid_format(self):
		account, _ = ledger.register(_document(), "Asha", "9990001111", "retailer")
		self.assertRegex(account.id, re.compile(r"^UID[0-9A-Z]{7}$"))

	def test_newest_first_and_last_uid(self):
		first, document = ledger.register(_document(), "Asha", "9990001111", "retailer")
		second, document = ledger.register(document, "Ravi", "9990002222", "distributor")
		self.assertEqual([a.id for a in document.users], [second.id, first.id])
		self.assertEqual(document.last_uid, second.id)

	def test_input_document_is_not_modified(self):
		original = _document()
		_, document = ledger.register(original, "Asha", "9990001111", "retailer")
		self.assertEqual(original.users, ())
		self.assertIsNone(original.last_uid)
		self.assertEqual(len(document.users), 1)

	def test_name_and_mobile_are_required(self):
		for name, mobile in (("", "9990001111"), ("Asha", ""), ("   ", "9990001111"), (None, "1")):
			with self.subTest(name=name, mobile=mobile):
				with self.assertRaises(InvalidInput):
					ledger.register(_document(), name, mobile, "retailer")

	def test_unknown_type_is_rejected(self):
		with self.assertRaises(InvalidInput):
			ledger.register(_document(), "Asha", "9990001111", "wholesaler")

	def test_find_by_id_on_empty_ledger(self):
		self.assertIsNone(ledger.find_by_id(_document(), "UIDABCDEFG"))
		self.assertIsNone(ledger.find_by_id(_document(), ""))


class TopUpTest(TestCase):
	"""Tests for wallet top-up and the status rule."""

	def setUp(self):
		self.account, self.document = ledger.register(_document(), "Asha", "9990001111", "retailer")

	def _wallet(self, document):
		return ledger.find_by_id(document, self.account.id)

	def test_scenario_activation_then_further_top_up(self):
		document = ledger.top_up(self.document, self.account.id, 199)
		self.assertEqual(self._wallet(document).wallet, 199)
		self.assertEqual(self._wallet(document).status, AccountStatus.ACTIVE)

		document = ledger.top_up(document, self.account.id, 50)
		self.assertEqual(self._wallet(document).wallet, 249)
		self.assertEqual(self._wallet(document).status, AccountStatus.ACTIVE)

	def test_wallet_increase_and_status(self):
		for amount in (0, 1, 198, 199, 200, 1000):
			with self.subTest(amount=amount):
				document = ledger.top_up(self.document, self.account.id, amount)
				account = self._wallet(document)
				self.assertEqual(account.wallet, amount)
				expected = AccountStatus.ACTIVE if amount >= 199 else AccountStatus.PENDING
				self.assertEqual(account.status, expected)

	def test_partial_top_ups_accumulate(self):
		document = ledger.top_up(self.document, self.account.id, 100)
		self.assertEqual(self._wallet(document).status, AccountStatus.PENDING)
		document = ledger.top_up(document, self.account.id, 99)
		self.assertEqual(self._wallet(document).wallet, 199)
		self.assertEqual(self._wallet(document).status, AccountStatus.ACTIVE)

	def test_active_is_never_reverted(self):
		active = Account(
			id="UIDACTIVE1", name="Old", mobile="1", type=AccountType.DISTRIBUTOR,
			price=499, wallet=10, status=AccountStatus.ACTIVE, created_at="2026-01-01T00:00:00.000Z",
		)
		document = Document(users=(active,), admin=Administrator("admin", "admin123"))
		document = ledger.top_up(document, "UIDACTIVE1", 0)
		self.assertEqual(ledger.find_by_id(document, "UIDACTIVE1").status, AccountStatus.ACTIVE)

	def test_numeric_strings_are_accepted(self):
		document = ledger.top_up(self.document, self.account.id, "199")
		self.assertEqual(self._wallet(document).wallet, 199)
		document = ledger.top_up(document, self.account.id, " 1e1 ")
		self.assertEqual(self._wallet(document).wallet, 209)

	def test_bad_amounts_are_rejected(self):
		for amount in (-1, "-5", "abc", "", None, "1.5", 2.5, True, "NaN", "Infinity", "1e5000", "1e999999999"):
			with self.subTest(amount=amount):
				with self.assertRaises(InvalidInput):
					ledger.top_up(self.document, self.account.id, amount)
		self.assertEqual(self._wallet(self.document).wallet, 0)

	@override_settings(MAX_TOPUP=500)
	def test_amount_cap(self):
		document = ledger.top_up(self.document, self.account.id, "500")
		self.assertEqual(self._wallet(document).wallet, 500)
		with self.assertRaises(InvalidInput) as context:
			ledger.top_up(document, self.account.id, 501)
		self.assertEqual(context.exception.message, "Amount cannot exceed 500.")

	def test_unknown_account(self):
		with self.assertRaises(NotFound):
			ledger.top_up(self.document, "UIDMISSING", 10)

	def test_simulate_payment_pays_the_price(self):
		document = ledger.simulate_payment(self.document, self.account.id)
		self.assertEqual(self._wallet(document).wallet, 199)
		self.assertTrue(self._wallet(document).is_active)

	def test_simulate_payment_unknown_account(self):
		with self.assertRaises(NotFound) as context:
			ledger.simulate_payment(self.document, "UIDMISSING")
		self.assertEqual(context.exception.message, "UID not found for simulation.")


class RemoveAndAdminTest(TestCase):
	"""Tests for removal and the administrator check."""

	def test_remove_is_idempotent(self):
		account, document = ledger.register(_document(), "Asha", "9990001111", "retailer")
		once = ledger.remove(document, account.id)
		twice = ledger.remove(once, account.id)
		self.assertEqual(once.users, ())
		self.assertEqual(once, twice)

	def test_remove_missing_id_is_a_no_op(self):
		_, document = ledger.register(_document(), "Asha", "9990001111", "retailer")
		self.assertIs(ledger.remove(document, "UIDMISSING"), document)

	def test_admin_wrong_password(self):
		with self.assertRaises(Unauthorized):
			ledger.authenticate_admin(_document(), "admin", "wrongpass")

	def test_admin_default_credentials(self):
		admin = ledger.authenticate_admin(_document(), "admin", "admin123")
		self.assertEqual(admin.username, "admin")

	def test_admin_comparison_is_exact(self):
		for username, password in (("Admin", "admin123"), ("admin ", "admin123"), ("admin", None)):
			with self.subTest(username=username, password=password):
				with self.assertRaises(Unauthorized):
					ledger.authenticate_admin(_document(), username, password)


class DocumentShapeTest(TestCase):
	"""Tests for the persisted document shape."""

	def test_seed_has_no_last_uid_key(self):
		data = _document().to_dict()
		self.assertEqual(set(data), {"users", "admin", "createdAt"})
		self.assertEqual(data["admin"], {"username": "admin", "password": "admin123"})

	def test_account_keys(self):
		_, document = ledger.register(_document(), "Asha", "9990001111", "retailer")
		data = document.to_dict()
		self.assertEqual(data["lastUid"], document.users[0].id)
		self.assertEqual(
			set(data["users"][0]),
			{"id", "name", "mobile", "type", "price", "wallet", "status", "createdAt"},
		)
		self.assertEqual(data["users"][0]["status"], "pending")

	def test_from_dict_restores_the_document(self):
		_, document = ledger.register(_document(), "Asha", "9990001111", "distributor")
		document = ledger.top_up(document, document.last_uid, 499)
		self.assertEqual(Document.from_dict(document.to_dict()), document)

	def test_from_dict_rejects_unknown_status(self):
		data = ledger.register(_document(), "Asha", "1", "retailer")[1].to_dict()
		data["users"][0]["status"] = "frozen"
		with self.assertRaises(ValueError):
			Document.from_dict(data)


class UidTest(TestCase):
	"""Tests for identifier generation."""

	def test_collision_is_retried(self):
		with mock.patch("core.constants.secrets.choice", side_effect=["A"] * 7 + ["B"] * 7):
			self.assertEqual(new_uid({"UIDAAAAAAA"}), "UIDBBBBBBB")

	def test_gives_up_when_every_candidate_is_taken(self):
		with mock.patch("core.constants.secrets.choice", return_value="A"):
			with self.assertRaises(RuntimeError):
				new_uid({"UIDAAAAAAA"})
