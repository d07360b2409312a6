"""Top-level settings for bodax notify."""

from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import (
    DiscordSettings,
    StripeSettings,
)
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Aggregate of every settings section.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Deployed commit, reported by /version

    Sections that are not passed explicitly are built from the environment,
    so ``Settings()`` loads everything and tests can pass ready-made
    sections instead:

        Settings(discord=DiscordSettings(DISCORD_BOT_TOKEN="t"), ...)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    discord: DiscordSettings
    stripe: StripeSettings
    server: ServerSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        sections = {
            "discord": DiscordSettings,
            "stripe": StripeSettings,
            "server": ServerSettings,
        }
        for name, section_class in sections.items():
            if name not in kwargs:
                kwargs[name] = section_class()

        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when PREFIX is empty."""
        return not bool(self.PREFIX)

    @property
    def enabled_features(self) -> Dict[str, bool]:
        """Which optional surfaces have the credentials they need.

        - bot: the embedded bot and /api/notifications/* (DISCORD_BOT_TOKEN)
        - oauth_proxy: /discord/token (DISCORD_CLIENT_ID and DISCORD_CLIENT_SECRET)
        - payments: /stripe/* (STRIPE_SECRET_KEY)
        """
        return {
            "bot": bool(self.discord.DISCORD_BOT_TOKEN),
            "oauth_proxy": bool(
                self.discord.DISCORD_CLIENT_ID and self.discord.DISCORD_CLIENT_SECRET
            ),
            "payments": bool(self.stripe.STRIPE_SECRET_KEY),
        }
