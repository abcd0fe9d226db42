"""
Management API credentials.

A credential is either a SAS token supplied by the caller, or one derived
from the management API identifier and key. Derived tokens follow the
SharedAccessSignature format accepted by the management API:

    SharedAccessSignature uid=<id>&ex=<expiry>&sn=<signature>
"""

import base64
import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .exceptions import MissingCredentialError

log = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 3600

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_expiry(expiry: datetime) -> str:
    """Format *expiry* as UTC with seven fractional digits and a trailing ``Z``."""
    if expiry.tzinfo is not None:
        expiry = expiry.astimezone(timezone.utc)
    return expiry.strftime("%Y-%m-%dT%H:%M:%S.%f") + "0Z"


def generate_sas_token(
    identifier: str,
    key: str,
    expires_in: int = DEFAULT_EXPIRES_IN,
    clock: Optional[Clock] = None,
) -> str:
    """
    Generate a SAS token from a management API identifier and key.

    Args:
        identifier: The management API identifier, usually ``integration``.
        key: The management API key (primary or secondary).
        expires_in: Seconds until the token expires.
        clock: Returns the current instant. Naive values are taken as UTC.

    Returns:
        The ``SharedAccessSignature ...`` credential string.
    """
    now = (clock or _utcnow)()
    expiry = format_expiry(now + timedelta(seconds=expires_in))

    data_to_sign = f"{identifier}\n{expiry}"
    digest = hmac.new(
        key.encode("utf-8"), data_to_sign.encode("utf-8"), hashlib.sha512
    ).digest()
    signature = base64.b64encode(digest).decode("ascii")

    log.debug("Generated SAS token for '%s' expiring at %s", identifier, expiry)
    return f"SharedAccessSignature uid={identifier}&ex={expiry}&sn={signature}"


def resolve_credential(
    token: Optional[str] = None,
    identifier: Optional[str] = None,
    key: Optional[str] = None,
    *,
    expires_in: int = DEFAULT_EXPIRES_IN,
    clock: Optional[Clock] = None,
) -> str:
    """
    Return the credential to attach to management API requests.

    An explicit token wins and is returned unchanged. Otherwise a token is
    derived from ``identifier`` and ``key``.

    Raises:
        MissingCredentialError: If neither a token nor both id and key are given.
    """
    if token:
        return token
    if identifier and key:
        return generate_sas_token(identifier, key, expires_in=expires_in, clock=clock)
    raise MissingCredentialError()
