"""Payment simulation: the prototype's "I have paid" button."""

from django.http import JsonResponse, HttpResponseBadRequest
from core.services import PortalServices
from . import messages
from .helpers import account_payload, portal_errors, read_body


@portal_errors
def simulate_payment(request):
	"""
	POST: Treat the account's price as paid through UPI {uid}; unverified by design
	"""
	if request.method != "POST":
		return HttpResponseBadRequest("POST only")
	body = read_body(request)
	account = PortalServices().simulate_payment(body.get("uid"))
	return JsonResponse({
		"account": account_payload(account),
		"message": messages.RECHARGED,
		"note": messages.SIMULATION_NOTE,
	})
