"""Security primitives for shared-secret webhook checks."""

from __future__ import annotations

import hmac

from reviewgate.core.exceptions import AuthenticationError

WEBHOOK_SECRET_HEADER = "x-webhook-secret"


def secrets_match(presented: str | None, expected: str) -> bool:
    """Constant-time comparison for shared secret values."""
    if presented is None:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


def verify_webhook_secret(presented: str | None, expected: str | None) -> None:
    """Raise when a secret is configured and the presented value does not match.

    An unset or empty expected secret disables the check.
    """
    if not expected:
        return
    if not secrets_match(presented, expected):
        raise AuthenticationError("Invalid webhook secret")
