"""Outcome categories for Discord and Stripe calls."""

from enum import Enum


class OperationStatus(str, Enum):
    """How a provider call ended.

    TRANSIENT_ERROR covers rate limits (429), provider 5xx responses and
    network failures. PERMANENT_ERROR covers every other rejected request,
    including 403 for a user who does not accept DMs. A 401 (bad bot token)
    is UNAUTHORIZED and a 404 (unknown user or channel) is NOT_FOUND.
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
