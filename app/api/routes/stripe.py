"""Stripe collaborator endpoints.

- POST /stripe/check-account-status: onboarding state of a connected account.
- GET|POST /stripe/verify-payment-session: confirm a checkout session was paid.

Stripe SDK calls are blocking, so these handlers are plain functions run in
FastAPI's threadpool.
"""

from typing import Optional

import stripe
from fastapi import APIRouter

from api.dependencies.cors import STRIPE_PROXY_CORS as CORS, UNSUPPORTED_METHODS
from infrastructure.logging import get_module_logger
from infrastructure.services import StripeClientDep
from integrations.stripe.errors import map_stripe_error
from integrations.stripe.payments import (
    PaymentNotCompletedError,
    check_account_status,
    verify_payment_session,
)
from models.payments import AccountStatusRequest, PaymentSessionRequest

logger = get_module_logger()
router = APIRouter(prefix="/stripe", tags=["Stripe"])

NOT_CONFIGURED = {"error": "Stripe secret key not configured"}


@router.options("/check-account-status")
@router.options("/verify-payment-session")
def stripe_preflight():
    return CORS.preflight()


@router.api_route("/check-account-status", methods=UNSUPPORTED_METHODS)
@router.api_route(
    "/verify-payment-session",
    methods=[m for m in UNSUPPORTED_METHODS if m != "GET"],
)
def stripe_method_not_allowed():
    return CORS.method_not_allowed(error_key="message")


@router.post("/check-account-status")
def get_account_status(
    client: StripeClientDep, body: Optional[AccountStatusRequest] = None
):
    """Report whether a connected account finished Stripe onboarding."""
    if client is None:
        logger.error("stripe_not_configured")
        return CORS.json(NOT_CONFIGURED, 500)

    body = body or AccountStatusRequest()
    if not body.account_id:
        return CORS.json({"error": "accountId is required"}, 400)

    try:
        status = check_account_status(client, body.account_id)
    except Exception as e:  # pylint: disable=broad-except
        response = map_stripe_error(
            e,
            not_found_message="Stripe account not found. Please verify the account ID is correct.",
            default_message="Failed to check account status",
        )
        logger.error(
            "stripe_account_status_failed",
            account_id=body.account_id,
            status_code=response.status_code,
            error_type=response.type,
            error_code=response.code,
            error=str(e),
        )
        return CORS.json(response.to_body(), response.status_code)

    return CORS.json(status.to_response())


def _verify(client: Optional[stripe.StripeClient], session_id: Optional[str]):
    if client is None:
        logger.error("stripe_not_configured")
        return CORS.json(NOT_CONFIGURED, 500)

    if not session_id:
        return CORS.json({"error": "session_id is required"}, 400)

    try:
        verification = verify_payment_session(client, session_id)
    except PaymentNotCompletedError as e:
        return CORS.json(
            {"error": "Payment not completed", "payment_status": e.payment_status},
            400,
        )
    except Exception as e:  # pylint: disable=broad-except
        response = map_stripe_error(
            e,
            not_found_message="Payment session not found",
            default_message="Failed to verify payment session",
        )
        logger.error(
            "payment_session_verification_failed",
            checkout_session=session_id,
            status_code=response.status_code,
            error=str(e),
        )
        return CORS.json(
            {"error": response.error, "details": response.details},
            response.status_code,
        )

    return CORS.json(verification.to_response())


@router.get("/verify-payment-session")
def verify_payment_session_get(
    client: StripeClientDep, session_id: Optional[str] = None
):
    return _verify(client, session_id)


@router.post("/verify-payment-session")
def verify_payment_session_post(
    client: StripeClientDep, body: Optional[PaymentSessionRequest] = None
):
    return _verify(client, body.session_id if body else None)
