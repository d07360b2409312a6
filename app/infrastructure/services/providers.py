"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import Optional, TYPE_CHECKING

import httpx
from fastapi import Request

from infrastructure.configuration import Settings

if TYPE_CHECKING:
    import stripe

    from infrastructure.notifications.service import NotificationService
    from integrations.discord.bot import DiscordBot


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_discord_transport() -> Optional[httpx.AsyncBaseTransport]:
    """
    Get the HTTP transport used by per-request Discord clients.

    Returns None so httpx uses its default network transport. Tests override
    this dependency with an ``httpx.MockTransport``.
    """
    return None


def get_bot(request: Request) -> Optional["DiscordBot"]:
    """
    Get the process-wide Discord bot, if one was started.

    Returns:
        DiscordBot exposed on request.state by BotMiddleware, or None.
    """
    return getattr(request.state, "bot", None)


def get_notification_service(request: Request) -> Optional["NotificationService"]:
    """
    Get the bot-embedded notification service, if the bot is configured.

    Returns:
        NotificationService stored on app.state by the lifespan, or None.
    """
    return getattr(request.app.state, "notification_service", None)


@lru_cache
def get_stripe_client() -> "stripe.StripeClient":
    """
    Get application-scoped Stripe client singleton.

    Raises:
        ConfigurationError: STRIPE_SECRET_KEY is not configured. Failures are
            not cached, so a later call picks up a fixed configuration.
    """
    # Import here to avoid circular dependency at module level
    from integrations.stripe.client import build_stripe_client

    settings = get_settings()
    return build_stripe_client(settings.stripe)


def get_optional_stripe_client() -> Optional["stripe.StripeClient"]:
    """
    Get the Stripe client, or None when STRIPE_SECRET_KEY is not configured.

    Routes use this to answer with their own "not configured" error.
    """
    # Import here to avoid circular dependency at module level
    from infrastructure.notifications.errors import ConfigurationError

    try:
        return get_stripe_client()
    except ConfigurationError:
        return None
