"""Operational endpoints that change the portal document (register/top-up/admin)."""

from django.http import JsonResponse, HttpResponseBadRequest
from django.middleware.csrf import get_token
from core.services import PortalServices
from . import messages
from .helpers import (
	SESSION_ADMIN, SESSION_UID, account_payload, admin_required, portal_errors, read_body
)


def health(request):
	return JsonResponse({"ok": True})


def csrf(request):
	# Forces creation/rotation of the CSRF token AND sets 'csrftoken' cookie
	return JsonResponse({"csrftoken": get_token(request)})


@portal_errors
def register(request):
	"""
	POST: Create a pending retailer/distributor account {name, mobile, type}
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	account = PortalServices().register(body.get("name"), body.get("mobile"), body.get("type", "retailer"))
	return JsonResponse({
		"account": account_payload(account),
		"message": messages.registration_created(account),
	}, status=201)


@portal_errors
def login(request):
	"""
	POST: Log in by UID {uid}; pending accounts log in with a recharge reminder
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	account = PortalServices().login(body.get("uid"))
	request.session[SESSION_UID] = account.id
	if account.is_active:
		message = messages.WELCOME.format(name=account.name, type=str(account.type))
	else:
		message = messages.NOT_ACTIVE
	return JsonResponse({"account": account_payload(account), "message": message})


def logout(request):
	"""
	POST: Forget the logged-in user and the admin flag
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	request.session.pop(SESSION_UID, None)
	request.session.pop(SESSION_ADMIN, None)
	return JsonResponse({"message": messages.LOGGED_OUT})


@portal_errors
def topup(request):
	"""
	POST: Recharge a wallet {uid, amount}
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	account = PortalServices().top_up(body.get("uid"), body.get("amount"))
	return JsonResponse({"account": account_payload(account), "message": messages.RECHARGED})


@portal_errors
def admin_login(request):
	"""
	POST: Check admin credentials {username, password} and flag the session
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	admin = PortalServices().authenticate_admin(body.get("username"), body.get("password"))
	request.session[SESSION_ADMIN] = True
	return JsonResponse({"username": admin.username, "message": messages.ADMIN_WELCOME})


@admin_required
@portal_errors
def admin_credit(request):
	"""
	POST: Admin credit of a wallet {uid, amount}
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	account = PortalServices().admin_credit(body.get("uid"), body.get("amount"))
	return JsonResponse({"account": account_payload(account), "message": messages.CREDITED})


@admin_required
@portal_errors
def admin_remove(request):
	"""
	POST: Remove an account {uid}; unknown UIDs are not an error
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	uid = body.get("uid")
	removed = PortalServices().remove(uid)
	message = messages.REMOVED if removed else messages.NOTHING_REMOVED
	return JsonResponse({"removed": removed, "message": message.format(uid=uid)})
