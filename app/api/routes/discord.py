"""Discord proxy endpoints used by the browser application.

- POST /discord/send-notification: broadcast to a channel or DM a list of
  users with a caller-supplied bot token.
- POST /discord/token: OAuth2 code-for-token exchange.
- POST /discord/user: OAuth2 user lookup.

Each endpoint answers its own CORS preflight and rejects other methods
with 405.
"""

from typing import Optional

from fastapi import APIRouter

from api.dependencies.cors import DISCORD_PROXY_CORS as CORS, UNSUPPORTED_METHODS
from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    ConfigurationError,
    DeliveryMode,
    InvalidRequestError,
    NotificationDispatcher,
    OutboundMessage,
)
from infrastructure.notifications.channels import DirectMessageChannel, SharedChannel
from infrastructure.configuration import Settings
from infrastructure.services import DiscordTransportDep, SettingsDep
from integrations.discord.client import DiscordClient
from integrations.discord.errors import DiscordApiError
from integrations.discord.oauth import DiscordOAuthClient
from models.discord import (
    SendNotificationRequest,
    TokenExchangeRequest,
    UserLookupRequest,
)

logger = get_module_logger()
router = APIRouter(prefix="/discord", tags=["Discord"])


@router.options("/send-notification")
@router.options("/token")
@router.options("/user")
def discord_preflight():
    return CORS.preflight()


@router.api_route("/send-notification", methods=UNSUPPORTED_METHODS)
@router.api_route("/user", methods=UNSUPPORTED_METHODS)
def discord_method_not_allowed():
    return CORS.method_not_allowed()


@router.api_route("/token", methods=UNSUPPORTED_METHODS)
def token_method_not_allowed():
    return CORS.method_not_allowed(error_key="message")


@router.post("/send-notification")
async def send_notification(
    settings: SettingsDep,
    transport: DiscordTransportDep,
    body: Optional[SendNotificationRequest] = None,
):
    """Send a message through Discord with the caller's bot token.

    A non-empty ``userIds`` sends one DM per user and always answers 200
    with per-user results. Otherwise ``channelId`` posts once to that
    channel and surfaces Discord's status code on failure.
    """
    body = body or SendNotificationRequest()
    if not body.type or not body.bot_token:
        return CORS.json({"error": "Missing required fields: type, botToken"}, 400)

    message = OutboundMessage.from_parts(body.message, body.embed)
    try:
        async with DiscordClient(
            bot_token=body.bot_token,
            base_url=settings.discord.DISCORD_API_BASE_URL,
            timeout=settings.discord.DISCORD_REQUEST_TIMEOUT,
            transport=transport,
        ) as client:
            dispatcher = NotificationDispatcher(
                direct_channel=DirectMessageChannel(client),
                shared_channel=SharedChannel(client),
            )
            report = await dispatcher.dispatch(
                message, recipient_ids=body.user_ids, channel_id=body.channel_id
            )
    except InvalidRequestError as e:
        return CORS.json({"error": str(e)}, 400)
    except Exception as e:  # pylint: disable=broad-except
        logger.error("discord_notification_endpoint_failed", error=str(e))
        return CORS.json({"error": "Internal server error", "message": str(e)}, 500)

    if report.mode == DeliveryMode.BROADCAST:
        outcome = report.outcomes[0]
        if outcome.is_success:
            return CORS.json(
                {"success": True, "messageId": outcome.message_id, "type": "channel"}
            )
        if outcome.status_code is None:
            # Discord was never reached
            return CORS.json(
                {"error": "Internal server error", "message": outcome.error_detail},
                500,
            )
        return CORS.json(
            {"error": outcome.error, "details": outcome.error_detail},
            outcome.status_code,
        )

    return CORS.json(
        {
            "success": True,
            "type": "dm",
            "results": report.to_results(),
            "successfulDMs": report.successful_count,
            "totalDMs": report.total_count,
        }
    )


def _require_oauth_credentials(settings: Settings) -> None:
    if not settings.discord.DISCORD_CLIENT_ID or not settings.discord.DISCORD_CLIENT_SECRET:
        raise ConfigurationError(
            "Missing DISCORD_CLIENT_ID or DISCORD_CLIENT_SECRET environment variables"
        )


@router.post("/token")
async def exchange_token(
    settings: SettingsDep,
    transport: DiscordTransportDep,
    body: Optional[TokenExchangeRequest] = None,
):
    """Exchange an OAuth2 authorization code for an access token."""
    body = body or TokenExchangeRequest()
    if not body.code or not body.redirect_uri:
        return CORS.json({"message": "Missing required parameters"}, 400)

    try:
        _require_oauth_credentials(settings)
    except ConfigurationError as e:
        logger.error("discord_oauth_not_configured")
        return CORS.json(
            {"message": "OAuth proxy not configured", "error": str(e)}, 500
        )

    try:
        async with DiscordOAuthClient(
            client_id=settings.discord.DISCORD_CLIENT_ID,
            client_secret=settings.discord.DISCORD_CLIENT_SECRET,
            base_url=settings.discord.DISCORD_API_BASE_URL,
            timeout=settings.discord.DISCORD_REQUEST_TIMEOUT,
            transport=transport,
        ) as oauth:
            token = await oauth.exchange_code(body.code, body.redirect_uri)
    except DiscordApiError as e:
        logger.warning(
            "discord_token_exchange_rejected",
            status_code=e.status_code,
            details=e.details,
        )
        return CORS.json(
            {"message": "Failed to exchange code for token", "error": e.details}, 400
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.error("discord_token_exchange_failed", error=str(e))
        return CORS.json({"message": "Internal server error", "error": str(e)}, 500)

    return CORS.json(
        {
            "access_token": token.get("access_token"),
            "token_type": token.get("token_type"),
            "expires_in": token.get("expires_in"),
            "scope": token.get("scope"),
        }
    )


@router.post("/user")
async def get_user(
    settings: SettingsDep,
    transport: DiscordTransportDep,
    body: Optional[UserLookupRequest] = None,
):
    """Return the Discord user that owns ``access_token``."""
    body = body or UserLookupRequest()
    if not body.access_token:
        return CORS.json({"error": "Access token is required"}, 400)

    try:
        async with DiscordOAuthClient(
            base_url=settings.discord.DISCORD_API_BASE_URL,
            timeout=settings.discord.DISCORD_REQUEST_TIMEOUT,
            transport=transport,
        ) as oauth:
            user = await oauth.get_user(body.access_token)
    except DiscordApiError as e:
        logger.warning("discord_user_lookup_rejected", status_code=e.status_code)
        return CORS.json(
            {"error": "Failed to get Discord user information", "details": e.details},
            e.status_code,
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.error("discord_user_lookup_failed", error=str(e))
        return CORS.json({"error": "Internal server error", "message": str(e)}, 500)

    return CORS.json(user)
