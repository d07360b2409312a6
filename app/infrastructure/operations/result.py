"""Result type for provider calls.

Channels return an OperationResult for every Discord call instead of
raising, so one recipient's failure can be folded into a DeliveryReport
while the remaining recipients are still processed.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one provider call.

    Attributes:
        status: high-level outcome
        message: human-readable summary for logs
        data: payload of a successful call (e.g. a channel or message id)
        error_code: machine error code (FORBIDDEN, RATE_LIMITED, ...)
        retry_after: seconds the provider asked callers to wait
        status_code: HTTP status returned by the provider, if any
        details: raw provider error text, kept verbatim
        discord_code: Discord's JSON error code (50007: DMs disabled)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None
    status_code: Optional[int] = None
    details: Optional[str] = None
    discord_code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_transient(self) -> bool:
        """True when the failure might clear on its own. Nothing retries it."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        *,
        retry_after: Optional[int] = None,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
        discord_code: Optional[int] = None,
    ) -> "OperationResult":
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            status_code=status_code,
            details=details,
            discord_code=discord_code,
        )

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None, **provider: Any
    ) -> "OperationResult":
        """Network failures, rate limits and provider 5xx responses."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code, **provider)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None, **provider: Any
    ) -> "OperationResult":
        """Rejected requests, e.g. a user who does not accept DMs."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code, **provider)

    def log_fields(self) -> Dict[str, Any]:
        """Failure fields worth logging, without empty values."""
        fields = {
            "operation_status": self.status.value,
            "error_code": self.error_code,
            "status_code": self.status_code,
            "discord_code": self.discord_code,
            "retry_after": self.retry_after,
            "error": self.details or self.message,
        }
        return {key: value for key, value in fields.items() if value is not None}
