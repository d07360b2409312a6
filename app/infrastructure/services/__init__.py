"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    DiscordTransportDep,
    BotDep,
    NotificationServiceDep,
    StripeClientDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_discord_transport,
    get_bot,
    get_notification_service,
    get_stripe_client,
    get_optional_stripe_client,
)

__all__ = [
    "SettingsDep",
    "DiscordTransportDep",
    "BotDep",
    "NotificationServiceDep",
    "StripeClientDep",
    "get_settings",
    "get_discord_transport",
    "get_bot",
    "get_notification_service",
    "get_stripe_client",
    "get_optional_stripe_client",
]
