"""Bot notification REST surface.

Thin HTTP layer over NotificationService. Each broadcast route validates
its body, sends the notification to every user in ``userIds`` and returns
the pass/fail summary. Per-user failures never fail the request.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    ConfigurationError,
    DeliveryReport,
    InvalidRequestError,
    NotificationService,
)
from infrastructure.services import NotificationServiceDep
from models.notifications import (
    AdminNotificationRequest,
    MatchNotificationRequest,
    TeamInvitationRequest,
    TournamentNotificationRequest,
)

logger = get_module_logger()
router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def _bad_request(error: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error})


def _failure(error: str, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": error, "details": str(exc)})


def _require_service(service: Optional[NotificationService]) -> NotificationService:
    if service is None:
        raise ConfigurationError("Discord bot is not configured")
    return service


def _sent(kind: str, report: DeliveryReport) -> Dict[str, Any]:
    return {
        "success": True,
        "results": report.to_summary(),
        "message": f"{kind} notification sent to {len(report.successes)} users",
    }


def _has_all(recipients: Optional[List[str]], *values: Optional[str]) -> bool:
    return recipients is not None and all(values)


@router.post("/tournament")
async def send_tournament_notification(
    body: TournamentNotificationRequest, service: NotificationServiceDep
):
    recipients = body.recipients()
    if not _has_all(recipients, body.tournament_name, body.start_time, body.message):
        return _bad_request(
            "Missing required fields: userIds (array), tournamentName, startTime, message"
        )

    try:
        report = await _require_service(service).send_tournament_notification(
            recipients, body.tournament_name, body.start_time, body.message
        )
    except InvalidRequestError as e:
        return _bad_request(str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.error("tournament_notification_failed", error=str(e))
        return _failure("Failed to send tournament notification", e)

    return _sent("Tournament", report)


@router.post("/match")
async def send_match_notification(
    body: MatchNotificationRequest, service: NotificationServiceDep
):
    recipients = body.recipients()
    if not _has_all(recipients, body.team1_name, body.team2_name, body.match_time):
        return _bad_request(
            "Missing required fields: userIds (array), team1Name, team2Name, matchTime"
        )

    try:
        report = await _require_service(service).send_match_notification(
            recipients, body.team1_name, body.team2_name, body.match_time, body.map
        )
    except InvalidRequestError as e:
        return _bad_request(str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.error("match_notification_failed", error=str(e))
        return _failure("Failed to send match notification", e)

    return _sent("Match", report)


@router.post("/team-invitation")
async def send_team_invitation(
    body: TeamInvitationRequest, service: NotificationServiceDep
):
    if not (body.user_id and body.team_name and body.inviter_name):
        return _bad_request("Missing required fields: userId, teamName, inviterName")

    try:
        delivered = await _require_service(service).send_team_invitation(
            body.user_id, body.team_name, body.inviter_name
        )
    except InvalidRequestError as e:
        return _bad_request(str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.error("team_invitation_failed", error=str(e))
        return _failure("Failed to send team invitation", e)

    if not delivered:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to send team invitation"},
        )
    return {"success": True, "message": "Team invitation sent successfully"}


@router.post("/admin")
async def send_admin_notification(
    body: AdminNotificationRequest, service: NotificationServiceDep
):
    recipients = body.recipients()
    if not _has_all(recipients, body.title, body.message):
        return _bad_request("Missing required fields: userIds (array), title, message")

    try:
        report = await _require_service(service).send_admin_notification(
            recipients, body.title, body.message, body.type or "info"
        )
    except InvalidRequestError as e:
        return _bad_request(str(e))
    except Exception as e:  # pylint: disable=broad-except
        logger.error("admin_notification_failed", error=str(e))
        return _failure("Failed to send admin notification", e)

    return _sent("Admin", report)
