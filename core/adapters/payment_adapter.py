"""Adapter over the UPI payment provider.

The provider is only reached through an outbound deep link opened by the
payer's UPI app. Nothing comes back: there is no callback to verify, and the
"I have paid" action in the portal is a manual trust signal.
"""

from urllib.parse import quote

from django.conf import settings

# Characters encodeURIComponent leaves alone besides [A-Za-z0-9_.-~]
_URI_COMPONENT_SAFE = "!*'()"


class PaymentAdapter:
	"""
	Builds UPI payment links from the configured merchant (payee) id
	"""

	provider_name = "upi"


	@staticmethod
	def merchant_id() -> str:
		return getattr(settings, "UPI_MERCHANT_ID", "7033151758-3@ybl")


	@staticmethod
	def upi_link(amount: int) -> str:
		"""
		upi://pay?pa=<merchant>&pn=<payee name>&am=<amount>
		"""
		payee_name = getattr(settings, "UPI_PAYEE_NAME", "PrintPortal")
		return "upi://pay?pa={pa}&pn={pn}&am={am}".format(
			pa=quote(PaymentAdapter.merchant_id(), safe=_URI_COMPONENT_SAFE),
			pn=quote(payee_name, safe=_URI_COMPONENT_SAFE),
			am=amount,
		)
