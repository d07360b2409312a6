"""Notification system errors.

Only errors that abort a whole call are raised. Per-recipient failures are
recorded in the DeliveryReport and never surface as exceptions.
"""

from typing import Iterable


class NotificationError(Exception):
    """Base class for notification errors."""


class ConfigurationError(NotificationError):
    """A required credential or setting is missing.

    Raised before any provider request is made.
    """


class InvalidRequestError(NotificationError):
    """The caller supplied a malformed request (no side effects occurred)."""


class InvalidParametersError(InvalidRequestError):
    """Required parameters for a notification kind are missing.

    Attributes:
        kind: notification kind being composed
        missing: names of the missing parameters, in declaration order
    """

    def __init__(self, kind: str, missing: Iterable[str]):
        self.kind = kind
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameters for {kind} notification: "
            + ", ".join(self.missing)
        )
