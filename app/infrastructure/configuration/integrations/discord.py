"""Discord integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class DiscordSettings(IntegrationSettings):
    """Discord bot and OAuth application configuration.

    Environment Variables:
        DISCORD_BOT_TOKEN: Bot token used by the embedded notification bot
        DISCORD_CLIENT_ID: OAuth2 application client ID
        DISCORD_CLIENT_SECRET: OAuth2 application client secret
        DISCORD_API_BASE_URL: REST API base URL (default: https://discord.com/api/v10)
        DISCORD_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 10)
        PLATFORM_NAME: Platform name shown in notification footers

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        bot_token = settings.discord.DISCORD_BOT_TOKEN
        footer = f"{settings.discord.PLATFORM_NAME} Tournament"
        ```
    """

    DISCORD_BOT_TOKEN: str = Field(default="", alias="DISCORD_BOT_TOKEN")
    DISCORD_CLIENT_ID: str | None = Field(default=None, alias="DISCORD_CLIENT_ID")
    DISCORD_CLIENT_SECRET: str | None = Field(
        default=None, alias="DISCORD_CLIENT_SECRET"
    )
    DISCORD_API_BASE_URL: str = Field(
        default="https://discord.com/api/v10", alias="DISCORD_API_BASE_URL"
    )
    DISCORD_REQUEST_TIMEOUT: float = Field(default=10.0, alias="DISCORD_REQUEST_TIMEOUT")
    PLATFORM_NAME: str = Field(default="Bodax Masters", alias="PLATFORM_NAME")
