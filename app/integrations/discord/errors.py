"""Discord API errors."""

from typing import Any, Mapping, Optional

import httpx


class DiscordApiError(Exception):
    """Raised when the Discord API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by Discord
        details: raw response body text, kept verbatim for diagnostics
        payload: parsed JSON body when the response carried one
        headers: response headers (used for rate limit hints)
    """

    def __init__(
        self,
        status_code: int,
        details: str,
        payload: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(f"Discord API error {status_code}: {details}")
        self.status_code = status_code
        self.details = details
        self.payload = payload
        self.headers = headers or {}

    @property
    def discord_code(self) -> Optional[int]:
        """Discord's JSON error code (e.g. 50007 when a user has DMs disabled)."""
        if isinstance(self.payload, dict):
            return self.payload.get("code")
        return None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "DiscordApiError":
        try:
            payload = response.json()
        except ValueError:
            payload = None
        return cls(
            status_code=response.status_code,
            details=response.text,
            payload=payload,
            headers=response.headers,
        )
