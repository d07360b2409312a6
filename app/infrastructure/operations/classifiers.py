"""Error classifiers for provider exceptions.

Converts Discord REST failures into standardized OperationResult objects so
that channels can record them instead of propagating them.

Usage:
    from infrastructure.operations.classifiers import classify_discord_error

    try:
        channel = await client.create_dm_channel(recipient_id)
    except Exception as exc:
        return classify_discord_error(exc)
"""

from typing import Optional

import httpx

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from integrations.discord.errors import DiscordApiError

DEFAULT_RETRY_AFTER = 1


def _retry_after(exc: DiscordApiError) -> int:
    """Read the provider's retry hint from the error body or headers."""
    value: Optional[object] = None
    if isinstance(exc.payload, dict):
        value = exc.payload.get("retry_after")
    if value is None and exc.headers:
        value = exc.headers.get("retry-after")
    try:
        # Discord reports fractional seconds
        return max(int(float(value)), 1) if value is not None else DEFAULT_RETRY_AFTER
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER


def classify_discord_error(exc: Exception) -> OperationResult:
    """Classify a Discord REST failure into an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401: Bad bot token → UNAUTHORIZED
    - 403: Missing access or DMs disabled → PERMANENT_ERROR
    - 404: Unknown user or channel → NOT_FOUND
    - 5xx: Provider error → TRANSIENT_ERROR
    - Other 4xx: Rejected request → PERMANENT_ERROR
    - httpx.TransportError: Network failure → TRANSIENT_ERROR

    The provider status code, raw error text and Discord error code are
    kept on the result.

    Args:
        exc: Exception raised while calling the Discord API

    Returns:
        OperationResult carrying the status, error code and provider fields
    """
    if isinstance(exc, httpx.TransportError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
            details=str(exc),
        )

    if not isinstance(exc, DiscordApiError):
        return OperationResult.transient_error(
            f"Unexpected error: {type(exc).__name__}: {str(exc)}",
            error_code="UNEXPECTED_ERROR",
            details=str(exc),
        )

    status_code = exc.status_code
    provider = {
        "status_code": status_code,
        "details": exc.details,
        "discord_code": exc.discord_code,
    }

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Discord API rate limited",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(exc),
            **provider,
        )

    if status_code == 401:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "Discord API authentication failed",
            error_code="UNAUTHORIZED",
            **provider,
        )

    if status_code == 403:
        return OperationResult.permanent_error(
            f"Discord API refused the request: {exc.details}",
            error_code="FORBIDDEN",
            **provider,
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Discord resource not found",
            error_code="NOT_FOUND",
            **provider,
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Discord API server error ({status_code})",
            error_code="SERVER_ERROR",
            **provider,
        )

    return OperationResult.permanent_error(
        f"Discord API client error ({status_code}): {exc.details}",
        error_code="HTTP_ERROR",
        **provider,
    )
