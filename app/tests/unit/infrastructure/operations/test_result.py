"""Unit tests for OperationResult and OperationStatus."""

import pytest

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    @pytest.mark.parametrize(
        "status,value",
        [
            (OperationStatus.SUCCESS, "success"),
            (OperationStatus.TRANSIENT_ERROR, "transient_error"),
            (OperationStatus.PERMANENT_ERROR, "permanent_error"),
            (OperationStatus.UNAUTHORIZED, "unauthorized"),
            (OperationStatus.NOT_FOUND, "not_found"),
        ],
    )
    def test_operation_status_values(self, status, value):
        assert status.value == value


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_with_data(self):
        result = OperationResult.success(data={"message_id": "m1"}, message="Sent")

        assert result.is_success
        assert result.data == {"message_id": "m1"}
        assert result.message == "Sent"

    def test_error_factory_with_retry_after(self):
        result = OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Rate limited",
            error_code="RATE_LIMITED",
            retry_after=3,
        )

        assert not result.is_success
        assert result.error_code == "RATE_LIMITED"
        assert result.retry_after == 3

    def test_transient_error_factory(self):
        result = OperationResult.transient_error("Timeout", error_code="CONNECTION_ERROR")

        assert result.status == OperationStatus.TRANSIENT_ERROR

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error("Forbidden", error_code="FORBIDDEN")

        assert result.status == OperationStatus.PERMANENT_ERROR


@pytest.mark.unit
class TestOperationResultProviderFields:
    def test_provider_fields_are_kept(self):
        result = OperationResult.permanent_error(
            "Forbidden",
            error_code="FORBIDDEN",
            status_code=403,
            details='{"code": 50007}',
            discord_code=50007,
        )

        assert result.status_code == 403
        assert result.details == '{"code": 50007}'
        assert result.discord_code == 50007
        assert not result.is_transient

    def test_success_has_no_provider_fields(self):
        result = OperationResult.success(data={"message_id": "m1"})

        assert result.status_code is None
        assert result.details is None

    def test_is_transient(self):
        assert OperationResult.transient_error("Timeout").is_transient


@pytest.mark.unit
class TestLogFields:
    def test_prefers_raw_details_and_drops_empty_values(self):
        result = OperationResult.permanent_error(
            "Discord API refused the request",
            error_code="FORBIDDEN",
            status_code=403,
            details="Cannot send messages to this user",
        )

        assert result.log_fields() == {
            "operation_status": "permanent_error",
            "error_code": "FORBIDDEN",
            "status_code": 403,
            "error": "Cannot send messages to this user",
        }

    def test_falls_back_to_message(self):
        result = OperationResult.error(
            OperationStatus.TRANSIENT_ERROR, "Rate limited", retry_after=2
        )

        assert result.log_fields() == {
            "operation_status": "transient_error",
            "retry_after": 2,
            "error": "Rate limited",
        }
