"""Tests for Stripe account and checkout session lookups."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import stripe

from integrations.stripe.payments import (
    PaymentNotCompletedError,
    check_account_status,
    verify_payment_session,
)


def make_account(**overrides):
    fields = {
        "id": "acct_123",
        "charges_enabled": True,
        "payouts_enabled": False,
        "details_submitted": True,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_session(**overrides):
    fields = {
        "id": "cs_test_123",
        "payment_status": "paid",
        "payment_intent": "pi_123",
        "amount_total": 2500,
        "metadata": {"tournamentId": "t-1", "teamId": "team-9", "organizerId": "org-3"},
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def stripe_client():
    return MagicMock()


@pytest.mark.unit
class TestCheckAccountStatus:
    def test_onboarded_account(self, stripe_client):
        stripe_client.accounts.retrieve.return_value = make_account()

        status = check_account_status(stripe_client, "acct_123")

        stripe_client.accounts.retrieve.assert_called_once_with("acct_123")
        assert status.to_response() == {
            "accountId": "acct_123",
            "chargesEnabled": True,
            "payoutsEnabled": False,
            "detailsSubmitted": True,
            "onboardingComplete": True,
        }

    def test_details_missing_is_not_onboarded(self, stripe_client):
        stripe_client.accounts.retrieve.return_value = make_account(
            details_submitted=False
        )

        assert check_account_status(stripe_client, "acct_123").onboarding_complete is False

    def test_unset_flags_are_false(self, stripe_client):
        stripe_client.accounts.retrieve.return_value = make_account(
            charges_enabled=None, details_submitted=None
        )

        status = check_account_status(stripe_client, "acct_123")

        assert status.charges_enabled is False
        assert status.onboarding_complete is False

    def test_stripe_errors_propagate(self, stripe_client):
        stripe_client.accounts.retrieve.side_effect = stripe.InvalidRequestError(
            "No such account", "id", code="resource_missing"
        )

        with pytest.raises(stripe.InvalidRequestError):
            check_account_status(stripe_client, "acct_missing")


@pytest.mark.unit
class TestVerifyPaymentSession:
    def test_paid_session_uses_payment_intent_amount(self, stripe_client):
        stripe_client.checkout.sessions.retrieve.return_value = make_session()
        stripe_client.payment_intents.retrieve.return_value = SimpleNamespace(
            id="pi_123", amount=3000
        )

        verification = verify_payment_session(stripe_client, "cs_test_123")

        stripe_client.payment_intents.retrieve.assert_called_once_with("pi_123")
        assert verification.to_response() == {
            "success": True,
            "session": {
                "id": "cs_test_123",
                "payment_status": "paid",
                "payment_intent": "pi_123",
                "amount": 30.0,
            },
            "metadata": {"tournamentId": "t-1", "teamId": "team-9", "organizerId": "org-3"},
        }

    def test_unpaid_session_raises(self, stripe_client):
        stripe_client.checkout.sessions.retrieve.return_value = make_session(
            payment_status="unpaid"
        )

        with pytest.raises(PaymentNotCompletedError) as exc_info:
            verify_payment_session(stripe_client, "cs_test_123")

        assert exc_info.value.payment_status == "unpaid"
        stripe_client.payment_intents.retrieve.assert_not_called()

    def test_intent_failure_falls_back_to_session_amount(self, stripe_client):
        stripe_client.checkout.sessions.retrieve.return_value = make_session()
        stripe_client.payment_intents.retrieve.side_effect = stripe.APIConnectionError(
            "Network unreachable"
        )

        verification = verify_payment_session(stripe_client, "cs_test_123")

        assert verification.amount == 25.0
        assert verification.payment_intent is None

    def test_session_without_intent_or_metadata(self, stripe_client):
        stripe_client.checkout.sessions.retrieve.return_value = make_session(
            payment_intent=None, metadata=None, amount_total=None
        )

        verification = verify_payment_session(stripe_client, "cs_test_123")

        assert verification.amount == 0
        assert verification.tournament_id is None
        stripe_client.payment_intents.retrieve.assert_not_called()
