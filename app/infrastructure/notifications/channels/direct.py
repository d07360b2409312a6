"""Direct message channel: resolves a private channel per recipient and sends to it."""

from integrations.discord.client import DiscordClient

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    DeliveryChannel,
    DeliveryOutcome,
    OutboundMessage,
)
from infrastructure.operations import OperationResult, classify_discord_error

logger = get_module_logger()

RESOLUTION_FAILED = "Failed to create DM channel"
SEND_FAILED = "Failed to send DM"


class DirectMessageChannel(NotificationChannel):
    """Discord DM channel.

    Resolution is not cached: every delivery opens (or re-opens) the DM
    channel with the recipient. Unknown users, users with DMs disabled and
    network failures all count as a failed delivery.
    """

    def __init__(self, client: DiscordClient):
        self._client = client

    @property
    def channel_name(self) -> str:
        return "dm"

    async def resolve_recipient(self, recipient_id: str) -> OperationResult:
        """Resolve a user ID to its private DeliveryChannel.

        Returns:
            OperationResult with the DeliveryChannel in data on success, or
            the classified provider error
        """
        try:
            channel = await self._client.create_dm_channel(recipient_id)
        except Exception as e:  # pylint: disable=broad-except
            result = classify_discord_error(e)
            logger.warning(
                "dm_channel_creation_failed",
                recipient_id=recipient_id,
                **result.log_fields(),
            )
            return result

        return OperationResult.success(
            data=DeliveryChannel.direct(channel["id"], recipient_id),
            message=f"Resolved DM channel for {recipient_id}",
        )

    async def send(
        self, message: OutboundMessage, channel: DeliveryChannel
    ) -> OperationResult:
        """Post ``message`` to an already resolved channel."""
        try:
            posted = await self._client.create_message(
                channel.channel_id,
                content=message.content,
                embeds=list(message.embeds),
            )
        except Exception as e:  # pylint: disable=broad-except
            return classify_discord_error(e)

        return OperationResult.success(data={"message_id": posted.get("id")})

    async def deliver(self, message: OutboundMessage, target: str) -> DeliveryOutcome:
        resolved = await self.resolve_recipient(target)
        if not resolved.is_success:
            return DeliveryOutcome.failed(
                target,
                error=RESOLUTION_FAILED,
                error_code="RECIPIENT_RESOLUTION_FAILED",
                error_detail=resolved.details or resolved.message,
                status_code=resolved.status_code,
            )

        sent = await self.send(message, resolved.data)
        if not sent.is_success:
            logger.warning("dm_send_failed", recipient_id=target, **sent.log_fields())
            return DeliveryOutcome.failed(
                target,
                error=SEND_FAILED,
                error_code="DELIVERY_FAILED",
                error_detail=sent.details or sent.message,
                status_code=sent.status_code,
            )

        logger.debug("dm_sent", recipient_id=target, message_id=sent.data["message_id"])
        return DeliveryOutcome.succeeded(target, sent.data["message_id"])

    async def health_check(self) -> OperationResult:
        try:
            user = await self._client.get_current_user()
        except Exception as e:  # pylint: disable=broad-except
            return classify_discord_error(e)
        return OperationResult.success(data={"bot_user_id": user.get("id")})
