"""Notification channels."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.direct import DirectMessageChannel
from infrastructure.notifications.channels.shared import SharedChannel

__all__ = ["NotificationChannel", "DirectMessageChannel", "SharedChannel"]
