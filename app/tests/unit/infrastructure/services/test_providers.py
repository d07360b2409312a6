"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- app.state backed providers (bot, notification service)
- Stripe client providers
- Dependency override pattern for testing
"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.datastructures import State

from infrastructure.configuration import Settings
from infrastructure.notifications.errors import ConfigurationError
from infrastructure.services import providers
from infrastructure.services.dependencies import BotDep, SettingsDep


@pytest.fixture(autouse=True)
def clear_provider_caches():
    providers.get_settings.cache_clear()
    providers.get_stripe_client.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_stripe_client.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_cached_instance(self):
        result1 = providers.get_settings()
        result2 = providers.get_settings()

        assert isinstance(result1, Settings)
        assert result1 is result2

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = providers.get_settings()
        providers.get_settings.cache_clear()

        assert providers.get_settings() is not instance1


@pytest.mark.unit
class TestAppStateProviders:
    def test_bot_and_service_read_from_request_and_app_state(self):
        request = MagicMock()
        request.state.bot = "bot"
        request.app.state.notification_service = "service"

        assert providers.get_bot(request) == "bot"
        assert providers.get_notification_service(request) == "service"

    def test_missing_state_returns_none(self):
        app = FastAPI()
        request = MagicMock()
        request.app = app
        request.state = State()

        assert providers.get_bot(request) is None
        assert providers.get_notification_service(request) is None

    def test_discord_transport_defaults_to_network(self):
        assert providers.get_discord_transport() is None


@pytest.mark.unit
class TestStripeProviders:
    def test_missing_key_raises_configuration_error(self, settings_factory):
        with patch.object(
            providers, "get_settings", return_value=settings_factory(STRIPE_SECRET_KEY=None)
        ):
            with pytest.raises(ConfigurationError):
                providers.get_stripe_client()

    def test_optional_client_is_none_without_key(self, settings_factory):
        with patch.object(
            providers, "get_settings", return_value=settings_factory(STRIPE_SECRET_KEY=None)
        ):
            assert providers.get_optional_stripe_client() is None

    def test_client_is_built_once(self, settings_factory):
        with patch.object(providers, "get_settings", return_value=settings_factory()):
            first = providers.get_stripe_client()
            second = providers.get_stripe_client()

        assert first is second


@pytest.mark.unit
class TestDependencyOverrides:
    def test_settings_dep_can_be_overridden(self, settings_factory):
        app = FastAPI()

        @app.get("/sha")
        def sha(settings: SettingsDep):
            return {"sha": settings.GIT_SHA}

        app.dependency_overrides[providers.get_settings] = lambda: settings_factory(
            GIT_SHA="feedbeef"
        )

        response = TestClient(app).get("/sha")

        assert response.json() == {"sha": "feedbeef"}

    def test_bot_dep_is_none_without_bot(self):
        app = FastAPI()

        @app.get("/bot")
        def bot(bot: BotDep):
            return {"bot": bot is not None}

        assert TestClient(app).get("/bot").json() == {"bot": False}
