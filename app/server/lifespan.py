from contextlib import asynccontextmanager
import sys
from typing import AsyncIterator, Optional, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.notifications import NotificationService
from infrastructure.services import get_settings
from integrations.discord.bot import DiscordBot
from integrations.discord.client import DiscordClient

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info(
        "configuration_initialized",
        base_settings=config_settings["settings"],
        enabled_features=settings.enabled_features,
    )
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _get_bot(settings: "Settings") -> Optional[DiscordBot]:
    """Create the Discord bot handle if a token is available and not in tests."""
    # Skip Discord initialization during tests
    if _is_test_environment():
        return None

    bot_token = settings.discord.DISCORD_BOT_TOKEN
    if not bool(bot_token):
        return None

    client = DiscordClient(
        bot_token=bot_token,
        base_url=settings.discord.DISCORD_API_BASE_URL,
        timeout=settings.discord.DISCORD_REQUEST_TIMEOUT,
    )
    return DiscordBot(client)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    bot = _get_bot(settings)
    app.state.bot = bot
    app.state.notification_service = None

    if bot is not None:
        await bot.start()
        app.state.notification_service = NotificationService(
            settings, client=bot.client
        )
    else:
        logger.info(
            "api_only_mode",
            message="No Discord bot token configured - proxy endpoints only",
        )

    yield

    logger.info("application_shutdown")

    if app.state.bot is not None:
        await app.state.bot.close()
