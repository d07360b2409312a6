"""Shared fixtures for the whole test suite."""

import pytest

from infrastructure.configuration import (
    DiscordSettings,
    ServerSettings,
    Settings,
    StripeSettings,
)
from infrastructure.logging import configure_logging


@pytest.fixture
def settings_factory():
    """Factory for Settings instances that never read the environment.

    Example:
        settings = settings_factory(DISCORD_CLIENT_ID=None)
        settings = settings_factory(STRIPE_SECRET_KEY="sk_test_123")
    """

    def _factory(**overrides) -> Settings:
        discord_values = {
            "DISCORD_BOT_TOKEN": "test-bot-token",
            "DISCORD_CLIENT_ID": "test-client-id",
            "DISCORD_CLIENT_SECRET": "test-client-secret",
            "DISCORD_API_BASE_URL": "https://discord.test/api/v10",
            "PLATFORM_NAME": "Bodax Masters",
        }
        stripe_values = {"STRIPE_SECRET_KEY": "sk_test_123"}
        top_level = {"PREFIX": "test-", "GIT_SHA": "abc1234"}

        for key, value in overrides.items():
            if key.startswith("DISCORD_") or key == "PLATFORM_NAME":
                discord_values[key] = value
            elif key.startswith("STRIPE_"):
                stripe_values[key] = value
            else:
                top_level[key] = value

        return Settings(
            discord=DiscordSettings(**discord_values),
            stripe=StripeSettings(**stripe_values),
            server=ServerSettings(),
            **top_level,
        )

    return _factory


@pytest.fixture
def settings(settings_factory):
    return settings_factory()


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Route structlog through the silenced test pipeline."""
    configure_logging()
