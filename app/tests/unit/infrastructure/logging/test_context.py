"""Unit tests for infrastructure.logging.context module."""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_dispatch_context,
    bind_request_context,
)


def _correlation_id():
    return structlog.contextvars.get_contextvars().get("correlation_id")


@pytest.mark.unit
class TestBindRequestContext:
    """Tests for bind_request_context()."""

    def test_auto_generates_correlation_id(self):
        with bind_request_context():
            correlation_id = _correlation_id()

        assert correlation_id is not None
        uuid.UUID(correlation_id)

    def test_binds_request_fields_and_extra_context(self):
        with bind_request_context(
            correlation_id="req-123",
            request_path="/discord/send-notification",
            request_method="POST",
            notification_type="dm",
        ):
            ctx = structlog.contextvars.get_contextvars()

        assert ctx["correlation_id"] == "req-123"
        assert ctx["request_path"] == "/discord/send-notification"
        assert ctx["request_method"] == "POST"
        assert ctx["notification_type"] == "dm"

    def test_skips_none_values(self):
        with bind_request_context(correlation_id="req-1"):
            ctx = structlog.contextvars.get_contextvars()

        assert "request_path" not in ctx
        assert "request_method" not in ctx

    def test_unbinds_after_exit(self):
        with bind_request_context(correlation_id="req-1", request_path="/health"):
            pass

        assert _correlation_id() is None
        assert "request_path" not in structlog.contextvars.get_contextvars()

    def test_unbinds_when_body_raises(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-1"):
                raise RuntimeError("boom")

        assert _correlation_id() is None


@pytest.mark.unit
class TestBindDispatchContext:
    def test_binds_mode_and_target_count(self):
        from infrastructure.notifications.models import DeliveryMode

        with bind_dispatch_context(DeliveryMode.DIRECT, target_count=3) as dispatch_id:
            ctx = structlog.contextvars.get_contextvars()

        assert ctx["dispatch_id"] == dispatch_id
        assert ctx["delivery_mode"] == DeliveryMode.DIRECT.value
        assert ctx["target_count"] == 3
        assert "dispatch_id" not in structlog.contextvars.get_contextvars()

    def test_nests_inside_request_context(self):
        with bind_request_context(correlation_id="req-7"):
            with bind_dispatch_context("broadcast", target_count=1):
                ctx = structlog.contextvars.get_contextvars()
            outer = structlog.contextvars.get_contextvars()

        assert ctx["correlation_id"] == "req-7"
        assert ctx["delivery_mode"] == "broadcast"
        assert "dispatch_id" not in outer
        assert outer["correlation_id"] == "req-7"

    def test_request_context_yields_correlation_id(self):
        with bind_request_context() as correlation_id:
            assert _correlation_id() == correlation_id
