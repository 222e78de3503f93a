"""Portal error taxonomy.

Every error carries a human-readable message that the API returns verbatim.
None of them is fatal: the caller reports the message and the stored document
stays as it was.
"""


class PortalError(Exception):
	"""Base class for recoverable portal failures."""

	code = "portal_error"

	def __init__(self, message):
		self.message = message
		super().__init__(message)


class InvalidInput(PortalError):
	"""Raised when registration or top-up fields are missing or malformed."""

	code = "invalid_input"


class NotFound(PortalError):
	"""Raised when an operation references an account id that does not exist."""

	code = "not_found"

	def __init__(self, account_id, message="UID not found."):
		self.account_id = account_id
		super().__init__(message)


class Unauthorized(PortalError):
	"""Raised when the administrator credential check fails."""

	code = "unauthorized"

	def __init__(self, message="Admin credentials incorrect."):
		super().__init__(message)


class CorruptData(PortalError):
	"""Raised when the stored document cannot be parsed into the expected shape."""

	code = "corrupt_data"

	def __init__(self, key, reason):
		self.key = key
		self.reason = reason
		super().__init__(f"Stored data under {key!r} is unreadable: {reason}")
