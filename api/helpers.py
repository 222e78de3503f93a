"""Request/response plumbing shared by the portal views."""

import json
from functools import wraps

from django.http import JsonResponse

from core.exceptions import CorruptData, InvalidInput, NotFound, PortalError, Unauthorized
from . import messages

SESSION_ADMIN = "portal_admin"
SESSION_UID = "portal_uid"

STATUS_BY_ERROR = {
	InvalidInput: 400,
	NotFound: 404,
	Unauthorized: 403,
	CorruptData: 500,
}


def read_body(request) -> dict:
	"""
	JSON object body, or the form fields for form-encoded posts
	"""
	if request.content_type in ("multipart/form-data", "application/x-www-form-urlencoded"):
		return request.POST.dict()
	try:
		body = json.loads(request.body or b"{}")
	except ValueError:
		raise InvalidInput("Invalid JSON")
	if not isinstance(body, dict):
		raise InvalidInput("JSON object expected")
	return body


def account_payload(account) -> dict:
	data = account.to_dict()
	data["active"] = account.is_active
	return data


def error_response(exc: PortalError) -> JsonResponse:
	status = STATUS_BY_ERROR.get(type(exc), 400)
	return JsonResponse({"error": exc.code, "message": exc.message}, status=status)


def portal_errors(view):
	"""
	Turn PortalError into a JSON error response instead of a 500 page
	"""
	@wraps(view)
	def wrapper(request, *args, **kwargs):
		try:
			return view(request, *args, **kwargs)
		except PortalError as e:
			return error_response(e)
	return wrapper


def admin_required(view):
	@wraps(view)
	def wrapper(request, *args, **kwargs):
		if not request.session.get(SESSION_ADMIN):
			return error_response(Unauthorized(messages.ADMIN_REQUIRED))
		return view(request, *args, **kwargs)
	return wrapper
