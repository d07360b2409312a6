"""Tests for Stripe error to HTTP response mapping."""

import httpx
import pytest
import stripe

from integrations.stripe.errors import (
    INVALID_KEY_MESSAGE,
    TIMEOUT_MESSAGE,
    map_stripe_error,
)

NOT_FOUND = "Payment session not found"
DEFAULT = "Failed to verify payment session"


def _map(exc):
    return map_stripe_error(exc, not_found_message=NOT_FOUND, default_message=DEFAULT)


@pytest.mark.unit
class TestMapStripeError:
    def test_resource_missing_is_404(self):
        exc = stripe.InvalidRequestError(
            "No such checkout.session: cs_missing", "id", code="resource_missing"
        )

        response = _map(exc)

        assert response.status_code == 404
        assert response.error == NOT_FOUND
        assert response.details == "No such checkout.session: cs_missing"
        assert response.type == "InvalidRequestError"
        assert response.code == "resource_missing"

    @pytest.mark.parametrize("code", ["api_key_expired", "invalid_api_key"])
    def test_invalid_key_codes_are_500(self, code):
        exc = stripe.InvalidRequestError("Expired API Key provided", None, code=code)

        response = _map(exc)

        assert response.status_code == 500
        assert response.error == INVALID_KEY_MESSAGE

    def test_other_invalid_request_is_400(self):
        exc = stripe.InvalidRequestError("Invalid account id", "account", code="parameter_invalid")

        response = _map(exc)

        assert response.status_code == 400
        assert response.error == "Stripe API error: Invalid account id"

    def test_authentication_error_is_500(self):
        response = _map(stripe.AuthenticationError("Invalid API Key provided"))

        assert response.status_code == 500
        assert response.error == INVALID_KEY_MESSAGE
        assert response.code == "NO_CODE"

    def test_connection_timeout_is_504(self):
        response = _map(stripe.APIConnectionError("Request timed out"))

        assert response.status_code == 504
        assert response.error == TIMEOUT_MESSAGE

    def test_connection_failure_is_503(self):
        response = _map(stripe.APIConnectionError("Network unreachable"))

        assert response.status_code == 503
        assert response.error == (
            "Connection to Stripe failed: Network unreachable. Please try again later."
        )

    def test_api_error_is_503(self):
        assert _map(stripe.APIError("Internal error")).status_code == 503

    def test_plain_timeout_is_504(self):
        response = _map(httpx.ReadTimeout("read timeout"))

        assert response.status_code == 504
        assert response.type == "ReadTimeout"

    def test_unknown_error_uses_default_message(self):
        response = _map(ValueError("boom"))

        assert response.status_code == 500
        assert response.error == DEFAULT
        assert response.details == "boom"

    def test_request_id_is_included_in_body(self):
        exc = stripe.InvalidRequestError(
            "No such account", "id", code="resource_missing",
            headers={"request-id": "req_123"},
        )

        body = _map(exc).to_body()

        assert body["request_id"] == "req_123"
        assert body["code"] == "resource_missing"

    def test_body_without_request_id(self):
        body = _map(ValueError("boom")).to_body()

        assert body == {
            "error": DEFAULT,
            "details": "boom",
            "type": "ValueError",
            "code": "NO_CODE",
        }
