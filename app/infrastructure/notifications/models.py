"""Notification system core models.

Platform-agnostic value types shared by the composer, the channels, the
dispatcher and the result aggregator.

Uses Pydantic BaseModel for:
- Immutable payloads (frozen models)
- Runtime validation of colors and identifiers
- Consistency with the API layer request models
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColorTag(Enum):
    """Accent color of a notification embed."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"
    CUSTOM = "custom"


COLOR_VALUES: Dict[ColorTag, int] = {
    ColorTag.INFO: 0x0099FF,
    ColorTag.WARNING: 0xFF9900,
    ColorTag.ERROR: 0xFF0000,
    ColorTag.SUCCESS: 0x00FF00,
}


class EmbedField(BaseModel):
    """A single name/value row of a notification embed."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


class NotificationPayload(BaseModel):
    """Structured notification content, built once per dispatch call.

    Attributes:
        title: embed title
        body: embed description
        color_tag: accent color; CUSTOM requires custom_color
        custom_color: RGB integer used when color_tag is CUSTOM
        fields: ordered embed fields
        footer_text: footer identifying the platform
        issued_at: composition time, rendered as the embed timestamp

    Example:
        payload = NotificationPayload(
            title="🏆 Tournament Notification",
            body="Check-in is open",
            color_tag=ColorTag.ERROR,
            fields=(EmbedField(name="Tournament", value="Bodax Masters"),),
            footer_text="Bodax Masters Tournament",
            issued_at=datetime.now(timezone.utc),
        )
        embed = payload.to_embed()
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    color_tag: ColorTag
    custom_color: Optional[int] = Field(default=None, ge=0, le=0xFFFFFF)
    fields: Tuple[EmbedField, ...] = ()
    footer_text: str
    issued_at: datetime

    @model_validator(mode="after")
    def validate_custom_color(self) -> "NotificationPayload":
        if self.color_tag == ColorTag.CUSTOM and self.custom_color is None:
            raise ValueError("custom_color is required when color_tag is custom")
        return self

    @property
    def color(self) -> int:
        if self.color_tag == ColorTag.CUSTOM:
            return self.custom_color  # type: ignore[return-value]
        return COLOR_VALUES[self.color_tag]

    def to_embed(self) -> Dict[str, Any]:
        """Render the payload as a Discord embed object."""
        embed: Dict[str, Any] = {
            "title": self.title,
            "description": self.body,
            "color": self.color,
            "timestamp": self.issued_at.isoformat(),
            "footer": {"text": self.footer_text},
        }
        if self.fields:
            embed["fields"] = [field.to_dict() for field in self.fields]
        return embed


class OutboundMessage(BaseModel):
    """Wire-level message body sent to a channel.

    Bot notifications are built from a NotificationPayload; proxy callers
    supply content and a raw embed themselves.
    """

    model_config = ConfigDict(frozen=True)

    content: str = ""
    embeds: Tuple[Dict[str, Any], ...] = ()

    @classmethod
    def from_payload(cls, payload: NotificationPayload) -> "OutboundMessage":
        return cls(embeds=(payload.to_embed(),))

    @classmethod
    def from_parts(
        cls, content: Optional[str] = None, embed: Optional[Dict[str, Any]] = None
    ) -> "OutboundMessage":
        return cls(content=content or "", embeds=(embed,) if embed else ())


class DeliveryMode(Enum):
    """How a dispatch call reaches its targets."""

    DIRECT = "dm"
    BROADCAST = "channel"


class DeliveryChannel(BaseModel):
    """Resolved destination of a send.

    Direct channels are resolved per dispatch call and never cached;
    shared channels are used as supplied by the caller.
    """

    model_config = ConfigDict(frozen=True)

    channel_id: str
    mode: DeliveryMode
    recipient_id: Optional[str] = None

    @classmethod
    def direct(cls, channel_id: str, recipient_id: str) -> "DeliveryChannel":
        return cls(
            channel_id=channel_id, mode=DeliveryMode.DIRECT, recipient_id=recipient_id
        )

    @classmethod
    def shared(cls, channel_id: str) -> "DeliveryChannel":
        return cls(channel_id=channel_id, mode=DeliveryMode.BROADCAST)


class DeliveryStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


class DeliveryOutcome(BaseModel):
    """Result of one delivery attempt to one target.

    Attributes:
        recipient_id: user ID (DM mode) or channel ID (broadcast mode)
        status: SUCCESS or FAILED
        message_id: ID of the delivered message
        error: short label of the failed step
        error_detail: raw provider error text, when there was one
        error_code: machine code of the failed step
        status_code: provider HTTP status, when the provider answered
    """

    recipient_id: str
    status: DeliveryStatus
    message_id: Optional[str] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None
    error_code: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == DeliveryStatus.SUCCESS

    @classmethod
    def succeeded(cls, recipient_id: str, message_id: Optional[str]) -> "DeliveryOutcome":
        return cls(
            recipient_id=recipient_id,
            status=DeliveryStatus.SUCCESS,
            message_id=message_id,
        )

    @classmethod
    def failed(
        cls,
        recipient_id: str,
        error: str,
        error_code: str,
        error_detail: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> "DeliveryOutcome":
        return cls(
            recipient_id=recipient_id,
            status=DeliveryStatus.FAILED,
            error=error,
            error_code=error_code,
            error_detail=error_detail,
            status_code=status_code,
        )

    def to_result_entry(self) -> Dict[str, Any]:
        """Per-recipient entry of the proxy's DM response."""
        if self.is_success:
            return {
                "userId": self.recipient_id,
                "success": True,
                "messageId": self.message_id,
            }
        entry: Dict[str, Any] = {
            "userId": self.recipient_id,
            "success": False,
            "error": self.error,
        }
        if self.error_detail:
            entry["details"] = self.error_detail
        return entry


class DeliveryReport(BaseModel):
    """Aggregate of every outcome of one dispatch call, in processing order.

    Every dispatched target appears exactly once in ``outcomes``; duplicate
    recipient IDs in the input appear once per occurrence.
    """

    mode: DeliveryMode
    outcomes: List[DeliveryOutcome] = Field(default_factory=list)

    @property
    def successes(self) -> List[str]:
        return [o.recipient_id for o in self.outcomes if o.is_success]

    @property
    def failures(self) -> List[str]:
        return [o.recipient_id for o in self.outcomes if not o.is_success]

    @property
    def successful_count(self) -> int:
        return sum(1 for o in self.outcomes if o.is_success)

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    def to_summary(self) -> Dict[str, List[str]]:
        """Pass/fail view returned by the bot-embedded API."""
        return {"success": self.successes, "failed": self.failures}

    def to_results(self) -> List[Dict[str, Any]]:
        """Per-recipient view returned by the HTTP proxy."""
        return [o.to_result_entry() for o in self.outcomes]
