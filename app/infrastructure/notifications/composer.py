"""Notification message composer.

Builds an immutable NotificationPayload from a notification kind and its
parameters. Composition performs no I/O; the only failure mode is missing
required parameters, reported as InvalidParametersError.

Usage:
    composer = NotificationComposer(platform_name="Bodax Masters")
    payload = composer.compose(
        NotificationKind.MATCH,
        {"team1_name": "Alpha", "team2_name": "Bravo", "match_time": "20:00 CET"},
    )
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from infrastructure.logging import get_module_logger
from infrastructure.notifications.errors import InvalidParametersError
from infrastructure.notifications.models import (
    ColorTag,
    EmbedField,
    NotificationPayload,
)

logger = get_module_logger()

DEFAULT_PLATFORM_NAME = "Bodax Masters"
DEFAULT_MAP = "TBD"


class NotificationKind(Enum):
    TOURNAMENT = "tournament"
    MATCH = "match"
    TEAM_INVITE = "teamInvite"
    ADMIN = "admin"


REQUIRED_PARAMS: Dict[NotificationKind, Tuple[str, ...]] = {
    NotificationKind.TOURNAMENT: ("tournament_name", "start_time", "message"),
    NotificationKind.MATCH: ("team1_name", "team2_name", "match_time"),
    NotificationKind.TEAM_INVITE: ("team_name", "inviter_name"),
    NotificationKind.ADMIN: ("title", "message"),
}

SEVERITY_COLORS: Dict[str, ColorTag] = {
    "info": ColorTag.INFO,
    "warning": ColorTag.WARNING,
    "error": ColorTag.ERROR,
    "success": ColorTag.SUCCESS,
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class NotificationComposer:
    """Builds notification payloads for every supported kind.

    Attributes:
        platform_name: name shown in embed footers
    """

    def __init__(
        self,
        platform_name: str = DEFAULT_PLATFORM_NAME,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.platform_name = platform_name
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._builders: Dict[
            NotificationKind, Callable[[Mapping[str, Any]], NotificationPayload]
        ] = {
            NotificationKind.TOURNAMENT: self._tournament,
            NotificationKind.MATCH: self._match,
            NotificationKind.TEAM_INVITE: self._team_invite,
            NotificationKind.ADMIN: self._admin,
        }

    @property
    def tournament_footer(self) -> str:
        return f"{self.platform_name} Tournament"

    @property
    def admin_footer(self) -> str:
        return f"{self.platform_name} Admin Panel"

    def compose(
        self, kind: Union[NotificationKind, str], params: Mapping[str, Any]
    ) -> NotificationPayload:
        """Build the payload for ``kind`` from ``params``.

        Args:
            kind: NotificationKind or its string value (e.g. "teamInvite")
            params: kind-specific parameters (snake_case keys)

        Returns:
            NotificationPayload stamped with the composition time

        Raises:
            InvalidParametersError: unknown kind or missing required params
        """
        try:
            kind = NotificationKind(kind)
        except ValueError as e:
            raise InvalidParametersError(str(kind), ["kind"]) from e

        missing = [
            name for name in REQUIRED_PARAMS[kind] if _is_blank(params.get(name))
        ]
        if missing:
            raise InvalidParametersError(kind.value, missing)

        return self._builders[kind](params)

    def _payload(
        self,
        title: str,
        body: str,
        color_tag: ColorTag,
        footer_text: str,
        fields: List[EmbedField],
    ) -> NotificationPayload:
        return NotificationPayload(
            title=title,
            body=body,
            color_tag=color_tag,
            fields=tuple(fields),
            footer_text=footer_text,
            issued_at=self._clock(),
        )

    def _tournament(self, params: Mapping[str, Any]) -> NotificationPayload:
        # Red accent is cosmetic here, not a failure signal.
        return self._payload(
            title="🏆 Tournament Notification",
            body=str(params["message"]),
            color_tag=ColorTag.ERROR,
            footer_text=self.tournament_footer,
            fields=[
                EmbedField(name="Tournament", value=str(params["tournament_name"])),
                EmbedField(name="Start Time", value=str(params["start_time"])),
            ],
        )

    def _match(self, params: Mapping[str, Any]) -> NotificationPayload:
        match_map = params.get("map")
        return self._payload(
            title="⚔️ Match Starting Soon",
            body="Your match is about to begin!",
            color_tag=ColorTag.SUCCESS,
            footer_text=self.tournament_footer,
            fields=[
                EmbedField(
                    name="Match",
                    value=f"{params['team1_name']} vs {params['team2_name']}",
                ),
                EmbedField(
                    name="Map",
                    value=DEFAULT_MAP if _is_blank(match_map) else str(match_map),
                ),
                EmbedField(name="Start Time", value=str(params["match_time"])),
            ],
        )

    def _team_invite(self, params: Mapping[str, Any]) -> NotificationPayload:
        return self._payload(
            title="👥 Team Invitation",
            body="You've been invited to join a team!",
            color_tag=ColorTag.INFO,
            footer_text=self.tournament_footer,
            fields=[
                EmbedField(name="Team", value=str(params["team_name"])),
                EmbedField(name="Invited by", value=str(params["inviter_name"])),
            ],
        )

    def _admin(self, params: Mapping[str, Any]) -> NotificationPayload:
        severity = params.get("severity") or "info"
        color_tag = SEVERITY_COLORS.get(str(severity).lower())
        if color_tag is None:
            logger.warning("unknown_admin_severity", severity=severity)
            color_tag = ColorTag.INFO
        return self._payload(
            title=f"🔔 Admin Notification: {params['title']}",
            body=str(params["message"]),
            color_tag=color_tag,
            footer_text=self.admin_footer,
            fields=[],
        )
