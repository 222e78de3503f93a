"""Read-only endpoints: portal info, the pay screen, the user panel and the admin list."""

from django.conf import settings
from django.http import JsonResponse
from core.constants import price_for
from core.exceptions import NotFound, Unauthorized
from core.ledger import AccountStatus, AccountType
from core.services import PortalServices
from . import messages
from .helpers import SESSION_UID, account_payload, admin_required, error_response, portal_errors


def info(request):
	"""
	GET: "How it works", plans and where to pay
	"""
	prices = {t.value: price_for(t.value) for t in AccountType}
	return JsonResponse({
		"plans": [{"type": t.value, "label": t.label, "price": prices[t.value]} for t in AccountType],
		"how_it_works": [line.format(**prices) for line in messages.HOW_IT_WORKS],
		"upi_id": getattr(settings, "UPI_MERCHANT_ID", ""),
		"support_whatsapp": getattr(settings, "SUPPORT_WHATSAPP", ""),
	})


@portal_errors
def pay(request):
	"""
	GET: Payment screen for ?uid= (defaults to the last registered UID)
	"""
	return JsonResponse(PortalServices().payment_details(request.GET.get("uid")))


@portal_errors
def me(request):
	"""
	GET: The account logged in on this session, as currently stored
	"""
	uid = request.session.get(SESSION_UID)
	if not uid:
		return error_response(Unauthorized("Login with your UID first."))
	account = PortalServices().find(uid)
	if account is None:
		raise NotFound(uid)
	return JsonResponse({"account": account_payload(account)})


@admin_required
@portal_errors
def admin_users(request):
	"""
	GET: Every account, newest first
	"""
	document = PortalServices().overview()
	users = [account_payload(a) for a in document.users]
	return JsonResponse({
		"count": len(users),
		"active": sum(1 for a in document.users if a.status == AccountStatus.ACTIVE),
		"users": users,
	})
