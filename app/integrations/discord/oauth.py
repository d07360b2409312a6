"""Discord OAuth2 helpers for the web application login flow.

The browser cannot hold the client secret, so the code-for-token exchange
and the first user lookup run server side.
"""

from typing import Any, Dict, Optional

import httpx

from integrations.discord.client import DEFAULT_API_BASE_URL
from integrations.discord.errors import DiscordApiError


class DiscordOAuthClient:
    """Async client for the Discord OAuth2 endpoints."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "DiscordOAuthClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def exchange_code(self, code: str, redirect_uri: str) -> Dict[str, Any]:
        """Exchange an authorization code for an access token.

        Args:
            code: authorization code returned to the redirect URI
            redirect_uri: the redirect URI used in the authorization request

        Returns:
            Token response (access_token, token_type, expires_in, scope, ...)

        Raises:
            DiscordApiError: Discord rejected the exchange
        """
        response = await self._client.post(
            "/oauth2/token",
            data={
                "client_id": self.client_id or "",
                "client_secret": self.client_secret or "",
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        if response.is_error:
            raise DiscordApiError.from_response(response)
        return response.json()

    async def get_user(self, access_token: str) -> Dict[str, Any]:
        """Fetch the user that granted ``access_token``."""
        response = await self._client.get(
            "/users/@me", headers={"Authorization": f"Bearer {access_token}"}
        )
        if response.is_error:
            raise DiscordApiError.from_response(response)
        return response.json()
