"""structlog processors installed by configure_logging().

The service handles three kinds of credentials: the Discord bot token
(its own, or one supplied by a proxy caller), Discord OAuth secrets and
access tokens, and the Stripe secret key. None of them may reach the log
output, either as a keyword value or embedded in an error string.
"""

import re
from typing import Any, Callable

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]

REDACTED = "***REDACTED***"

# Keys whose values are always masked (substring, case-insensitive)
SENSITIVE_PATTERNS = frozenset(
    {
        "token",
        "secret",
        "password",
        "authorization",
        "api_key",
        "apikey",
        "cookie",
        "credential",
    }
)

# Credentials that show up inside free text such as provider error messages
CREDENTIAL_IN_TEXT = re.compile(
    r"\b(?:sk|rk)_(?:live|test)_[A-Za-z0-9]+"
    r"|\b(?:Bot|Bearer)\s+[A-Za-z0-9._\-]+"
)


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Stamp every entry with the service name and the deployed git SHA."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def _is_sensitive_key(key: str, patterns: frozenset[str]) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in patterns)


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Mask credentials in log entries.

    Values under a sensitive key are replaced outright. Other string values
    are scrubbed of Stripe secret keys and ``Bot``/``Bearer`` authorization
    values, which Discord and Stripe error messages can echo back.

    Args:
        mask_value: Replacement for masked values.
        additional_patterns: Extra key patterns to treat as sensitive.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked: dict[str, Any] = {}
        for key, value in event_dict.items():
            if value is None:
                masked[key] = value
            elif _is_sensitive_key(key, patterns):
                masked[key] = mask_value
            elif isinstance(value, str):
                masked[key] = CREDENTIAL_IN_TEXT.sub(mask_value, value)
            else:
                masked[key] = value
        return masked

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Cap string values at ``max_length`` characters.

    Raw Discord and Stripe error bodies are logged on delivery failures.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
