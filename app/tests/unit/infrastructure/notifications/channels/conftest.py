"""Fixtures for notification channel tests."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from integrations.discord.client import DiscordClient
from integrations.discord.errors import DiscordApiError


@pytest.fixture
def mock_client():
    """DiscordClient double with every API call mocked."""
    client = MagicMock(spec=DiscordClient)
    client.create_dm_channel = AsyncMock(
        side_effect=lambda recipient_id: {"id": f"dm-{recipient_id}"}
    )
    client.create_message = AsyncMock(return_value={"id": "msg-1"})
    client.get_current_user = AsyncMock(return_value={"id": "bot-1"})
    return client


@pytest.fixture
def api_error():
    """Factory for DiscordApiError instances.

    Example:
        error = api_error(403, {"message": "Cannot send messages", "code": 50007})
    """

    def _factory(status_code: int, payload=None, headers=None) -> DiscordApiError:
        payload = payload if payload is not None else {"message": "error", "code": 0}
        return DiscordApiError.from_response(
            httpx.Response(status_code, json=payload, headers=headers)
        )

    return _factory
