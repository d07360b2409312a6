"""Notification channel abstract base class.

All channel implementations (direct message, shared channel) implement
this interface.
"""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import DeliveryOutcome, OutboundMessage
from infrastructure.operations import OperationResult


class NotificationChannel(ABC):
    """Abstract base class for notification channels.

    Each channel delivers through a specific kind of Discord destination:
    - DirectMessageChannel: private DM channel, resolved per recipient
    - SharedChannel: caller-supplied guild channel, no resolution

    Example Implementation:
        class SharedChannel(NotificationChannel):

            @property
            def channel_name(self) -> str:
                return "channel"

            async def deliver(self, message, target):
                result = await self.send(message, DeliveryChannel.shared(target))
                ...
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used for routing and logging."""

    @abstractmethod
    async def deliver(self, message: OutboundMessage, target: str) -> DeliveryOutcome:
        """Deliver ``message`` to one target.

        Must not raise for provider failures: they are returned as a FAILED
        DeliveryOutcome so that the dispatcher can keep going.

        Args:
            message: message to deliver
            target: recipient user ID or channel ID, depending on the channel

        Returns:
            Exactly one DeliveryOutcome for ``target``
        """

    @abstractmethod
    async def health_check(self) -> OperationResult:
        """Check channel health (API connectivity, credentials)."""
