"""Stripe-backed payment lookups used by the web application.

Both operations are read-only: they retrieve a connected account or a
checkout session and report its state. Stripe errors propagate to the API
layer, which translates them with errors.map_stripe_error.
"""

from typing import Any, Dict, Optional

import stripe
from pydantic import BaseModel

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class AccountStatus(BaseModel):
    account_id: str
    charges_enabled: bool
    payouts_enabled: bool
    details_submitted: bool
    onboarding_complete: bool

    def to_response(self) -> Dict[str, Any]:
        return {
            "accountId": self.account_id,
            "chargesEnabled": self.charges_enabled,
            "payoutsEnabled": self.payouts_enabled,
            "detailsSubmitted": self.details_submitted,
            "onboardingComplete": self.onboarding_complete,
        }


class PaymentVerification(BaseModel):
    session_id: str
    payment_status: str
    payment_intent: Optional[str] = None
    amount: float = 0
    tournament_id: Optional[str] = None
    team_id: Optional[str] = None
    organizer_id: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "session": {
                "id": self.session_id,
                "payment_status": self.payment_status,
                "payment_intent": self.payment_intent,
                "amount": self.amount,
            },
            "metadata": {
                "tournamentId": self.tournament_id,
                "teamId": self.team_id,
                "organizerId": self.organizer_id,
            },
        }


class PaymentNotCompletedError(Exception):
    """The checkout session exists but has not been paid."""

    def __init__(self, session_id: str, payment_status: str):
        super().__init__(f"Payment not completed for session {session_id}")
        self.session_id = session_id
        self.payment_status = payment_status


def check_account_status(client: stripe.StripeClient, account_id: str) -> AccountStatus:
    """Report the onboarding state of a connected account.

    An account counts as onboarded once it can accept charges and has
    submitted its details.
    """
    account = client.accounts.retrieve(account_id)

    status = AccountStatus(
        account_id=account.id,
        charges_enabled=bool(account.charges_enabled),
        payouts_enabled=bool(account.payouts_enabled),
        details_submitted=bool(account.details_submitted),
        onboarding_complete=account.charges_enabled is True
        and account.details_submitted is True,
    )
    logger.info(
        "stripe_account_status_checked",
        account_id=status.account_id,
        charges_enabled=status.charges_enabled,
        payouts_enabled=status.payouts_enabled,
        onboarding_complete=status.onboarding_complete,
    )
    return status


def _to_amount(minor_units: Optional[int]) -> float:
    return minor_units / 100 if minor_units else 0


def verify_payment_session(
    client: stripe.StripeClient, session_id: str
) -> PaymentVerification:
    """Confirm that a checkout session was paid and return its details.

    Raises:
        PaymentNotCompletedError: the session's payment_status is not "paid"
    """
    session = client.checkout.sessions.retrieve(session_id)

    if session.payment_status != "paid":
        logger.warning(
            "payment_not_completed",
            checkout_session=session.id,
            payment_status=session.payment_status,
        )
        raise PaymentNotCompletedError(session.id, session.payment_status)

    metadata = session.metadata or {}

    payment_intent_id = None
    amount = _to_amount(session.amount_total)
    if session.payment_intent:
        try:
            payment_intent = client.payment_intents.retrieve(session.payment_intent)
            payment_intent_id = payment_intent.id
            amount = _to_amount(payment_intent.amount)
        except stripe.StripeError as e:
            # The session amount is good enough when the intent lookup fails.
            logger.error(
                "payment_intent_retrieval_failed",
                checkout_session=session.id,
                error=str(e),
            )

    return PaymentVerification(
        session_id=session.id,
        payment_status=session.payment_status,
        payment_intent=payment_intent_id,
        amount=amount,
        tournament_id=metadata.get("tournamentId"),
        team_id=metadata.get("teamId"),
        organizer_id=metadata.get("organizerId"),
    )
