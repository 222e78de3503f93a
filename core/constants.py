"""Pricing, identifier and timestamp helpers shared across the portal.


- price_for maps an account type to its one-time registration price (whole rupees).
- new_uid produces the short "UID..." account identifiers.
- now_iso produces timestamps in the stored format (UTC, milliseconds, Z suffix).
"""

import secrets
import string

from django.conf import settings
from django.utils import timezone

DEFAULT_ACCOUNT_PRICES = {"retailer": 199, "distributor": 499}

UID_PREFIX = "UID"
UID_LENGTH = 7
UID_ALPHABET = string.digits + string.ascii_uppercase
UID_MAX_ATTEMPTS = 20
DEFAULT_MAX_TOPUP = 1_000_000


def price_for(account_type: str) -> int:
    """
    Registration price for an account type, read from settings.ACCOUNT_PRICES
    """
    prices = getattr(settings, "ACCOUNT_PRICES", DEFAULT_ACCOUNT_PRICES)
    return int(prices[str(account_type)])


def max_topup() -> int:
    """
    Largest accepted single top-up, read from settings.MAX_TOPUP
    """
    return int(getattr(settings, "MAX_TOPUP", DEFAULT_MAX_TOPUP))


def new_uid(taken=()) -> str:
    """
    Random "UID" + 7 base-36 characters, retried while it collides with an id in `taken`
    """
    taken = set(taken)
    for _ in range(UID_MAX_ATTEMPTS):
        uid = UID_PREFIX + "".join(secrets.choice(UID_ALPHABET) for _ in range(UID_LENGTH))
        if uid not in taken:
            return uid
    raise RuntimeError(f"Could not generate a free UID after {UID_MAX_ATTEMPTS} attempts")


def now_iso() -> str:
    """
    Current UTC time as e.g. "2026-10-19T12:00:00.000Z"
    """
    return timezone.now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
