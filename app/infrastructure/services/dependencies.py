"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated, Optional

import httpx
import stripe
from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.notifications.service import NotificationService
from infrastructure.services.providers import (
    get_bot,
    get_discord_transport,
    get_notification_service,
    get_optional_stripe_client,
    get_settings,
)
from integrations.discord.bot import DiscordBot

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Transport for per-request Discord clients (None = real network)
DiscordTransportDep = Annotated[
    Optional[httpx.AsyncBaseTransport], Depends(get_discord_transport)
]

# Process-wide bot and its notification service; None when no token is set
BotDep = Annotated[Optional[DiscordBot], Depends(get_bot)]
NotificationServiceDep = Annotated[
    Optional[NotificationService], Depends(get_notification_service)
]

# Stripe client; None when STRIPE_SECRET_KEY is not set
StripeClientDep = Annotated[
    Optional[stripe.StripeClient], Depends(get_optional_stripe_client)
]

__all__ = [
    "SettingsDep",
    "DiscordTransportDep",
    "BotDep",
    "NotificationServiceDep",
    "StripeClientDep",
]
