"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        PORT: Port the bot server listens on (default: 3001)
        CORS_ALLOW_ORIGINS: Comma separated list of allowed origins (default: *)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        port = settings.server.PORT
        origins = settings.server.allow_origins
        ```
    """

    PORT: int = Field(default=3001, alias="PORT")
    CORS_ALLOW_ORIGINS: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    @property
    def allow_origins(self) -> List[str]:
        """Allowed CORS origins parsed from the comma separated setting."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOW_ORIGINS.split(",")
            if origin.strip()
        ]
