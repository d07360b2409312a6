"""Fixtures for HTTP route tests.

Routes are exercised through the real application with its dependencies
overridden: outbound Discord calls go to FakeDiscordApi and Stripe calls to
a MagicMock client.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.notifications import NotificationService
from infrastructure.services import providers
from integrations.discord.client import DiscordClient
from server import server
from tests.factories import FakeDiscordApi


@pytest.fixture
def fake_api():
    return FakeDiscordApi()


@pytest.fixture
def stripe_client():
    return MagicMock()


@pytest.fixture
def notification_service(settings, fake_api):
    client = DiscordClient(
        bot_token="test-bot-token",
        base_url=settings.discord.DISCORD_API_BASE_URL,
        transport=fake_api.transport(),
    )
    return NotificationService(settings, client=client)


@pytest.fixture
def app(settings, fake_api, stripe_client, notification_service):
    handler = server.handler
    handler.dependency_overrides[providers.get_settings] = lambda: settings
    handler.dependency_overrides[providers.get_discord_transport] = fake_api.transport
    handler.dependency_overrides[providers.get_optional_stripe_client] = (
        lambda: stripe_client
    )
    handler.dependency_overrides[providers.get_notification_service] = (
        lambda: notification_service
    )
    get_limiter().reset()
    yield handler
    handler.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
