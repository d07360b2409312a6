"""Fixtures for Discord integration tests."""

import pytest

from integrations.discord.client import DiscordClient
from integrations.discord.oauth import DiscordOAuthClient
from tests.factories import FakeDiscordApi

BASE_URL = "https://discord.test/api/v10"


@pytest.fixture
def fake_api():
    return FakeDiscordApi()


@pytest.fixture
def client(fake_api):
    return DiscordClient(
        bot_token="test-bot-token", base_url=BASE_URL, transport=fake_api.transport()
    )


@pytest.fixture
def oauth(fake_api):
    return DiscordOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        base_url=BASE_URL,
        transport=fake_api.transport(),
    )
