"""Service runtime settings sections."""

from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = ["ServerSettings"]
