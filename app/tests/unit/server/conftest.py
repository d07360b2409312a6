"""Fixtures for server module unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_bot():
    """Create a mock Discord bot handle."""
    bot = MagicMock()
    bot.client = MagicMock()
    bot.start = AsyncMock(return_value=True)
    bot.close = AsyncMock()
    return bot
