"""Base classes for settings sections.

Every section reads the process environment and an optional ``.env`` file,
matches variable names case sensitively and ignores unrelated variables,
so one ``.env`` can hold the whole service configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Credentials and endpoints of an external provider (Discord, Stripe).

    A missing credential is not a startup error: the feature that needs it
    reports a ConfigurationError when it is used.
    """

    model_config = SECTION_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings of the service itself (listening port, CORS origins)."""

    model_config = SECTION_CONFIG
