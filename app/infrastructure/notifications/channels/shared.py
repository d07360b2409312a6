"""Shared channel: posts to a caller-supplied guild channel."""

from integrations.discord.client import DiscordClient

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import DeliveryOutcome, OutboundMessage
from infrastructure.operations import OperationResult, classify_discord_error

logger = get_module_logger()

SEND_FAILED = "Failed to send Discord channel notification"


class SharedChannel(NotificationChannel):
    """Broadcast channel. The channel ID is used as given, never resolved."""

    def __init__(self, client: DiscordClient):
        self._client = client

    @property
    def channel_name(self) -> str:
        return "channel"

    async def deliver(self, message: OutboundMessage, target: str) -> DeliveryOutcome:
        try:
            posted = await self._client.create_message(
                target,
                content=message.content,
                embeds=list(message.embeds),
            )
        except Exception as e:  # pylint: disable=broad-except
            result = classify_discord_error(e)
            logger.error("channel_send_failed", channel_id=target, **result.log_fields())
            return DeliveryOutcome.failed(
                target,
                error=SEND_FAILED,
                error_code="DELIVERY_FAILED",
                error_detail=result.details or result.message,
                status_code=result.status_code,
            )

        logger.info("channel_message_sent", channel_id=target, message_id=posted.get("id"))
        return DeliveryOutcome.succeeded(target, posted.get("id"))

    async def health_check(self) -> OperationResult:
        try:
            user = await self._client.get_current_user()
        except Exception as e:  # pylint: disable=broad-except
            return classify_discord_error(e)
        return OperationResult.success(data={"bot_user_id": user.get("id")})
