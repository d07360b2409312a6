from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request

from api.dependencies.rate_limits import SYSTEM_ROUTE_LIMIT, get_limiter
from infrastructure.services import BotDep, NotificationServiceDep, SettingsDep
from integrations.discord.bot import DiscordBot

router = APIRouter(tags=["System"])
limiter = get_limiter()


def _bot_state(bot: Optional[DiscordBot]) -> str:
    return "connected" if bot is not None and bot.is_ready else "connecting"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# One shared limit for version, health and status polling
@router.get("/version")
@limiter.limit(SYSTEM_ROUTE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_ROUTE_LIMIT)
def get_health(request: Request, bot: BotDep):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return {"status": "healthy", "bot": _bot_state(bot), "timestamp": _now()}


@router.get("/api/bot/status")
@limiter.limit(SYSTEM_ROUTE_LIMIT)
async def get_bot_status(
    request: Request,  # pylint: disable=unused-argument
    bot: BotDep,
    service: NotificationServiceDep,
):
    """Bot connection state, uptime in seconds and per-channel health."""
    channels = await service.dispatcher.health_check() if service is not None else {}
    return {
        "status": "online",
        "bot": _bot_state(bot),
        "uptime": bot.uptime if bot is not None else 0,
        "channels": channels,
        "timestamp": _now(),
    }
