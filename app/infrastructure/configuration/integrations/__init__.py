"""Provider settings sections."""

from infrastructure.configuration.integrations.discord import DiscordSettings
from infrastructure.configuration.integrations.stripe import StripeSettings

__all__ = ["DiscordSettings", "StripeSettings"]
