"""Async Discord REST client used by the notification bot and the proxy.

Wraps the handful of Discord API primitives the notification system needs:
opening a DM channel with a user, posting a message to a channel and
reading the bot's own identity.

Usage:
    async with DiscordClient(bot_token="...") as client:
        channel = await client.create_dm_channel("80351110224678912")
        message = await client.create_message(channel["id"], embeds=[embed])
"""

from typing import Any, Dict, List, Optional

import httpx

from infrastructure.logging import get_module_logger
from integrations.discord.errors import DiscordApiError

logger = get_module_logger()

DEFAULT_API_BASE_URL = "https://discord.com/api/v10"
USER_AGENT = "DiscordBot (https://bodax-masters.com, 1.0)"


class DiscordClient:
    """Async client for the Discord REST API authenticated as a bot.

    Non-2xx responses raise DiscordApiError carrying the raw body text.
    Network failures propagate as httpx.TransportError. Nothing is retried.

    Attributes:
        base_url: Discord API base URL
        timeout: per-request timeout in seconds
    """

    def __init__(
        self,
        bot_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={
                "Authorization": f"Bot {bot_token}",
                "User-Agent": USER_AGENT,
            },
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "DiscordClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            logger.debug(
                "discord_api_error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise DiscordApiError.from_response(response)
        if not response.content:
            return None
        return response.json()

    async def create_dm_channel(self, recipient_id: str) -> Dict[str, Any]:
        """Open (or fetch) the private channel between the bot and a user.

        Args:
            recipient_id: Discord user ID

        Returns:
            Channel object; ``id`` is the DM channel ID
        """
        return await self._request(
            "POST", "/users/@me/channels", json={"recipient_id": recipient_id}
        )

    async def create_message(
        self,
        channel_id: str,
        content: str = "",
        embeds: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Post a message to a channel.

        Args:
            channel_id: target channel (guild text channel or DM channel)
            content: plain text content
            embeds: optional list of embed objects

        Returns:
            Message object; ``id`` is the message ID
        """
        body: Dict[str, Any] = {"content": content}
        if embeds:
            body["embeds"] = embeds
        return await self._request("POST", f"/channels/{channel_id}/messages", json=body)

    async def get_current_user(self) -> Dict[str, Any]:
        """Return the bot's own user object; doubles as a credential check."""
        return await self._request("GET", "/users/@me")
