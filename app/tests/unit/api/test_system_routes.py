"""Tests for version, health and bot status routes."""

from unittest.mock import MagicMock

import pytest

from infrastructure.notifications import NotificationService
from infrastructure.services import providers
from integrations.discord.client import DiscordClient


@pytest.fixture
def ready_bot(app):
    bot = MagicMock()
    bot.is_ready = True
    bot.uptime = 42.5
    app.dependency_overrides[providers.get_bot] = lambda: bot
    return bot


@pytest.mark.unit
class TestSystemRoutes:
    def test_version(self, client):
        assert client.get("/version").json() == {"version": "abc1234"}

    def test_health_without_bot(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["bot"] == "connecting"
        assert "timestamp" in body

    def test_health_with_ready_bot(self, client, ready_bot):
        assert client.get("/health").json()["bot"] == "connected"

    def test_bot_status(self, client, ready_bot):
        body = client.get("/api/bot/status").json()

        assert body["status"] == "online"
        assert body["bot"] == "connected"
        assert body["uptime"] == 42.5
        assert body["channels"] == {"dm": True, "channel": True}

    def test_bot_status_without_bot(self, client):
        body = client.get("/api/bot/status").json()

        assert body["bot"] == "connecting"
        assert body["uptime"] == 0

    def test_bot_status_reports_unhealthy_channels(self, app, client, settings, fake_api):
        rejected = DiscordClient(
            bot_token="bad-token",
            base_url=settings.discord.DISCORD_API_BASE_URL,
            transport=fake_api.transport(),
        )
        service = NotificationService(settings, client=rejected)
        app.dependency_overrides[providers.get_notification_service] = lambda: service

        body = client.get("/api/bot/status").json()

        assert body["channels"] == {"dm": False, "channel": False}

    def test_bot_status_without_service(self, app, client):
        app.dependency_overrides[providers.get_notification_service] = lambda: None

        assert client.get("/api/bot/status").json()["channels"] == {}

    def test_rate_limit(self, client):
        for _ in range(50):
            client.get("/version")

        response = client.get("/version")

        assert response.status_code == 429
        assert response.json() == {"message": "Rate limit exceeded"}


@pytest.mark.unit
class TestFallbackHandlers:
    def test_unknown_route(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/version", headers={"X-Correlation-ID": "corr-1"})

        assert response.headers["X-Correlation-ID"] == "corr-1"

    @pytest.mark.parametrize(
        "path", ["/api/notifications/tournament", "/health", "/api/bot/status"]
    )
    def test_bare_options_is_empty_200(self, client, path):
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""

    def test_invalid_json_body_is_400(self, client):
        response = client.post(
            "/api/notifications/admin",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


@pytest.mark.unit
class TestBotMiddlewareWiring:
    def test_health_sees_bot_started_by_lifespan(self, app, client):
        bot = MagicMock()
        bot.is_ready = True
        app.state.bot = bot
        try:
            assert client.get("/health").json()["bot"] == "connected"
        finally:
            del app.state.bot
