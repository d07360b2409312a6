"""Notification dispatcher with direct-message and broadcast delivery.

Delivers one message either to a shared channel (broadcast mode) or to a
list of users one DM at a time (direct mode), and aggregates the outcomes.

Guarantees:
- Recipients are processed sequentially, in input order; at most one
  provider request is in flight per dispatch call.
- A failure for one recipient never aborts the remaining recipients.
- Every input recipient (duplicates included) appears exactly once in the
  returned DeliveryReport.
- Nothing is retried; a failed attempt is final for the call.

Usage Example:
    dispatcher = NotificationDispatcher(
        direct_channel=DirectMessageChannel(client),
        shared_channel=SharedChannel(client),
    )

    report = await dispatcher.dispatch(message, recipient_ids=["123", "456"])
    logger.info("sent", sent=report.successful_count, total=report.total_count)
"""

from typing import Dict, Optional, Sequence

from infrastructure.logging import bind_dispatch_context, get_module_logger
from infrastructure.notifications.aggregator import ResultAggregator, aggregate
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.errors import InvalidRequestError
from infrastructure.notifications.models import (
    DeliveryMode,
    DeliveryOutcome,
    DeliveryReport,
    OutboundMessage,
)

logger = get_module_logger()


class NotificationDispatcher:
    """Routes a message to its targets and collects a DeliveryReport.

    Attributes:
        direct_channel: channel used for per-recipient DMs
        shared_channel: channel used for broadcast to a shared channel
    """

    def __init__(
        self,
        direct_channel: NotificationChannel,
        shared_channel: NotificationChannel,
    ):
        self.direct_channel = direct_channel
        self.shared_channel = shared_channel

    @property
    def channels(self) -> Dict[str, NotificationChannel]:
        return {
            self.direct_channel.channel_name: self.direct_channel,
            self.shared_channel.channel_name: self.shared_channel,
        }

    async def dispatch(
        self,
        message: OutboundMessage,
        recipient_ids: Optional[Sequence[str]] = None,
        channel_id: Optional[str] = None,
    ) -> DeliveryReport:
        """Dispatch ``message`` in the mode selected by the supplied target.

        A non-empty ``recipient_ids`` selects direct mode; otherwise a
        ``channel_id`` selects broadcast mode.

        Raises:
            InvalidRequestError: neither target was supplied
        """
        recipients = list(recipient_ids or [])
        if recipients:
            return await self.dispatch_direct(message, recipients)
        if channel_id:
            return await self.dispatch_broadcast(message, channel_id)
        raise InvalidRequestError(
            "Either channelId (for channel messages) or userIds (for DMs) must be provided"
        )

    async def dispatch_direct(
        self, message: OutboundMessage, recipient_ids: Sequence[str]
    ) -> DeliveryReport:
        """Send ``message`` as a DM to each recipient, one after another."""
        aggregator = ResultAggregator(DeliveryMode.DIRECT)

        with bind_dispatch_context(DeliveryMode.DIRECT, len(recipient_ids)):
            for recipient_id in recipient_ids:
                outcome = await self._deliver_one(
                    self.direct_channel, message, recipient_id
                )
                aggregator.record(outcome)

            report = aggregator.build()
            logger.info(
                "dm_dispatch_completed",
                successful_count=report.successful_count,
                failed=report.failures,
            )
        return report

    async def dispatch_broadcast(
        self, message: OutboundMessage, channel_id: str
    ) -> DeliveryReport:
        """Send ``message`` once to a shared channel."""
        with bind_dispatch_context(DeliveryMode.BROADCAST, 1):
            outcome = await self._deliver_one(self.shared_channel, message, channel_id)
        return aggregate([outcome], DeliveryMode.BROADCAST)

    async def _deliver_one(
        self, channel: NotificationChannel, message: OutboundMessage, target: str
    ) -> DeliveryOutcome:
        try:
            return await channel.deliver(message, target)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "delivery_exception",
                channel_name=channel.channel_name,
                target=target,
                error=str(e),
                exc_info=True,
            )
            return DeliveryOutcome.failed(
                target,
                error=str(e),
                error_code="UNEXPECTED_ERROR",
            )

    async def health_check(self) -> Dict[str, bool]:
        """Check health of all channels.

        Returns:
            Dict mapping channel name to health status (True=healthy)
        """
        health_status = {}
        for channel_name, channel in self.channels.items():
            try:
                result = await channel.health_check()
                health_status[channel_name] = result.is_success
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "channel_health_check_failed",
                    channel_name=channel_name,
                    error=str(e),
                )
                health_status[channel_name] = False
        return health_status
