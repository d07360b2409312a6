"""Test fixtures for notification infrastructure tests."""

import pytest

from infrastructure.notifications.channels import DirectMessageChannel, SharedChannel
from infrastructure.notifications.composer import NotificationComposer
from infrastructure.notifications.dispatcher import NotificationDispatcher
from integrations.discord.client import DiscordClient
from tests.factories import FIXED_TIME, FakeDiscordApi


@pytest.fixture
def fake_api():
    """Scriptable Discord API; see tests.factories.discord.FakeDiscordApi."""
    return FakeDiscordApi()


@pytest.fixture
def discord_client(fake_api):
    """DiscordClient wired to the fake API through httpx.MockTransport."""
    return DiscordClient(
        bot_token="test-bot-token",
        base_url="https://discord.test/api/v10",
        transport=fake_api.transport(),
    )


@pytest.fixture
def dispatcher(discord_client):
    return NotificationDispatcher(
        direct_channel=DirectMessageChannel(discord_client),
        shared_channel=SharedChannel(discord_client),
    )


@pytest.fixture
def composer():
    """Composer with a frozen clock so payloads are deterministic."""
    return NotificationComposer(platform_name="Bodax Masters", clock=lambda: FIXED_TIME)
