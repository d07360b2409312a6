"""Test data factories for deterministic test data generation."""

from tests.factories.discord import (
    FakeDiscordApi,
    make_discord_message,
    make_discord_user,
    make_dm_channel,
)
from tests.factories.notifications import (
    FIXED_TIME,
    make_failure,
    make_message,
    make_payload,
    make_success,
)

__all__ = [
    "FIXED_TIME",
    "FakeDiscordApi",
    "make_discord_message",
    "make_discord_user",
    "make_dm_channel",
    "make_failure",
    "make_message",
    "make_payload",
    "make_success",
]
