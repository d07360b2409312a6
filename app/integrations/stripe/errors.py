"""Stripe error to HTTP response mapping.

Mapping table:

    InvalidRequestError, code resource_missing         -> 404
    InvalidRequestError, code invalid/expired API key  -> 500
    AuthenticationError                                -> 500
    InvalidRequestError, any other code                -> 400
    APIConnectionError / APIError, timed out           -> 504
    APIConnectionError / APIError                      -> 503
    anything else mentioning a timeout                 -> 504
    anything else                                      -> 500
"""

from dataclasses import dataclass, field
from typing import Any, Dict

import stripe

INVALID_KEY_CODES = frozenset({"api_key_expired", "invalid_api_key"})
INVALID_KEY_MESSAGE = "Stripe API key is invalid or expired. Please contact support."
TIMEOUT_MESSAGE = "Request to Stripe timed out. Please try again."


@dataclass
class StripeErrorResponse:
    """HTTP translation of a Stripe failure."""

    status_code: int
    error: str
    details: str
    type: str
    code: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_body(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "details": self.details,
            "type": self.type,
            "code": self.code,
            **self.extra,
        }


def _is_timeout(message: str) -> bool:
    lowered = message.lower()
    return "timeout" in lowered or "timed out" in lowered


def map_stripe_error(
    exc: Exception,
    not_found_message: str,
    default_message: str,
) -> StripeErrorResponse:
    """Translate a Stripe SDK (or transport) error into a StripeErrorResponse.

    Args:
        exc: exception raised while calling Stripe
        not_found_message: message used for resource_missing
        default_message: message used when nothing more specific applies
    """
    message = getattr(exc, "user_message", None) or str(exc) or default_message
    code = getattr(exc, "code", None) or "NO_CODE"
    error_type = type(exc).__name__

    def response(status_code: int, error: str) -> StripeErrorResponse:
        return StripeErrorResponse(
            status_code=status_code,
            error=error,
            details=message,
            type=error_type,
            code=code,
            extra={"request_id": exc.request_id}
            if getattr(exc, "request_id", None)
            else {},
        )

    if isinstance(exc, stripe.InvalidRequestError):
        if code == "resource_missing":
            return response(404, not_found_message)
        if code in INVALID_KEY_CODES:
            return response(500, INVALID_KEY_MESSAGE)
        return response(400, f"Stripe API error: {message}")

    if isinstance(exc, stripe.AuthenticationError):
        return response(500, INVALID_KEY_MESSAGE)

    if isinstance(exc, (stripe.APIConnectionError, stripe.APIError)):
        if _is_timeout(message):
            return response(504, TIMEOUT_MESSAGE)
        return response(
            503, f"Connection to Stripe failed: {message}. Please try again later."
        )

    if _is_timeout(message):
        return response(504, TIMEOUT_MESSAGE)

    return response(500, default_message)
