"""Service configuration.

Settings aggregates one pydantic-settings section per concern:

    settings.discord  # DiscordSettings: bot token, OAuth app, API base URL
    settings.stripe   # StripeSettings: secret key, timeout, retries
    settings.server   # ServerSettings: port, CORS origins

Application code gets the process-wide instance from
infrastructure.services.get_settings() (or the SettingsDep alias in routes);
tests build their own Settings with explicit sections.
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import DiscordSettings, StripeSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "DiscordSettings", "StripeSettings", "ServerSettings"]
