"""Notification system.

Composes tournament notifications, delivers them through Discord DMs or a
shared channel, and aggregates per-recipient outcomes into a report.

Usage Example:
    from infrastructure.notifications import (
        NotificationComposer,
        NotificationDispatcher,
        NotificationKind,
        OutboundMessage,
    )

    payload = NotificationComposer().compose(
        NotificationKind.ADMIN, {"title": "Maintenance", "message": "Tonight 22:00"}
    )
    report = await dispatcher.dispatch(
        OutboundMessage.from_payload(payload), recipient_ids=user_ids
    )
"""

from infrastructure.notifications.aggregator import ResultAggregator, aggregate
from infrastructure.notifications.composer import NotificationComposer, NotificationKind
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.errors import (
    ConfigurationError,
    InvalidParametersError,
    InvalidRequestError,
    NotificationError,
)
from infrastructure.notifications.models import (
    ColorTag,
    DeliveryChannel,
    DeliveryMode,
    DeliveryOutcome,
    DeliveryReport,
    DeliveryStatus,
    EmbedField,
    NotificationPayload,
    OutboundMessage,
)
from infrastructure.notifications.service import NotificationService

__all__ = [
    "ColorTag",
    "ConfigurationError",
    "DeliveryChannel",
    "DeliveryMode",
    "DeliveryOutcome",
    "DeliveryReport",
    "DeliveryStatus",
    "EmbedField",
    "InvalidParametersError",
    "InvalidRequestError",
    "NotificationComposer",
    "NotificationDispatcher",
    "NotificationError",
    "NotificationKind",
    "NotificationPayload",
    "NotificationService",
    "OutboundMessage",
    "ResultAggregator",
    "aggregate",
]
