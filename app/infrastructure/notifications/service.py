"""Notification service: the bot-embedded dispatch API.

Composes a notification once and dispatches it to a list of Discord users
through the process-wide bot client.
"""

from typing import Optional, Sequence, TYPE_CHECKING

from infrastructure.logging import get_module_logger
from infrastructure.notifications.composer import NotificationComposer, NotificationKind
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.models import DeliveryReport, OutboundMessage

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from integrations.discord.client import DiscordClient

logger = get_module_logger()


class NotificationService:
    """Class-based notification service.

    Thin facade over NotificationComposer and NotificationDispatcher used by
    the bot REST surface and any in-process caller.

    Usage:
        service = NotificationService(settings, client=bot.client)

        report = await service.send_match_notification(
            ["80351110224678912"], "Alpha", "Bravo", "20:00 CET"
        )
        report.to_summary()  # {"success": [...], "failed": [...]}
    """

    def __init__(
        self,
        settings: "Settings",
        client: Optional["DiscordClient"] = None,
        dispatcher: Optional[NotificationDispatcher] = None,
        composer: Optional[NotificationComposer] = None,
    ):
        """Initialize notification service.

        Args:
            settings: Settings instance (required, passed from provider).
            client: Process-wide Discord client; required unless a
                dispatcher is supplied.
            dispatcher: Optional pre-configured NotificationDispatcher.
            composer: Optional pre-configured NotificationComposer.
        """
        if dispatcher is None:
            # Import here to avoid circular dependency at module level
            from infrastructure.notifications.channels import (
                DirectMessageChannel,
                SharedChannel,
            )
            from infrastructure.notifications.errors import ConfigurationError

            if client is None:
                raise ConfigurationError("Discord bot client is not configured")

            dispatcher = NotificationDispatcher(
                direct_channel=DirectMessageChannel(client),
                shared_channel=SharedChannel(client),
            )

        self._settings = settings
        self._dispatcher = dispatcher
        self._composer = composer or NotificationComposer(
            platform_name=settings.discord.PLATFORM_NAME
        )

    async def _send(
        self, kind: NotificationKind, recipient_ids: Sequence[str], **params
    ) -> DeliveryReport:
        payload = self._composer.compose(kind, params)
        report = await self._dispatcher.dispatch_direct(
            OutboundMessage.from_payload(payload), list(recipient_ids)
        )
        logger.info(
            "notification_sent",
            kind=kind.value,
            successful_count=report.successful_count,
            total_count=report.total_count,
        )
        return report

    async def send_tournament_notification(
        self,
        recipient_ids: Sequence[str],
        tournament_name: str,
        start_time: str,
        message: str,
    ) -> DeliveryReport:
        return await self._send(
            NotificationKind.TOURNAMENT,
            recipient_ids,
            tournament_name=tournament_name,
            start_time=start_time,
            message=message,
        )

    async def send_match_notification(
        self,
        recipient_ids: Sequence[str],
        team1_name: str,
        team2_name: str,
        match_time: str,
        map: Optional[str] = None,  # pylint: disable=redefined-builtin
    ) -> DeliveryReport:
        return await self._send(
            NotificationKind.MATCH,
            recipient_ids,
            team1_name=team1_name,
            team2_name=team2_name,
            match_time=match_time,
            map=map,
        )

    async def send_team_invitation(
        self, recipient_id: str, team_name: str, inviter_name: str
    ) -> bool:
        """Invite a single user to a team.

        Returns:
            True if the DM was delivered, False otherwise
        """
        report = await self._send(
            NotificationKind.TEAM_INVITE,
            [recipient_id],
            team_name=team_name,
            inviter_name=inviter_name,
        )
        return report.successful_count == 1

    async def send_admin_notification(
        self,
        recipient_ids: Sequence[str],
        title: str,
        message: str,
        severity: str = "info",
    ) -> DeliveryReport:
        return await self._send(
            NotificationKind.ADMIN,
            recipient_ids,
            title=title,
            message=message,
            severity=severity,
        )

    @property
    def dispatcher(self) -> NotificationDispatcher:
        """Access underlying NotificationDispatcher instance."""
        return self._dispatcher
