"""Long-lived Discord bot handle.

One DiscordBot exists per process. It owns the authenticated client that
every bot-embedded dispatch call borrows; it is created at startup and
closed at shutdown.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from infrastructure.logging import get_module_logger
from integrations.discord.client import DiscordClient

logger = get_module_logger()


class DiscordBot:
    """Process-wide bot state: the client, its identity and readiness."""

    def __init__(self, client: DiscordClient):
        self.client = client
        self.user: Optional[Dict[str, Any]] = None
        self.started_at = time.monotonic()
        self.connected_at: Optional[datetime] = None

    @property
    def is_ready(self) -> bool:
        return self.user is not None

    @property
    def uptime(self) -> float:
        """Seconds since the bot handle was created."""
        return time.monotonic() - self.started_at

    async def start(self) -> bool:
        """Verify the bot credential by reading the bot's own identity.

        A failure leaves the bot in the "connecting" state; dispatch calls
        still go through and fail per recipient if the token is bad.
        """
        try:
            self.user = await self.client.get_current_user()
        except Exception as e:  # pylint: disable=broad-except
            logger.error("discord_bot_login_failed", error=str(e))
            return False

        self.connected_at = datetime.now(timezone.utc)
        logger.info(
            "discord_bot_ready",
            bot_user_id=self.user.get("id"),
            bot_username=self.user.get("username"),
        )
        return True

    async def close(self) -> None:
        await self.client.close()
        logger.info("discord_bot_stopped")
