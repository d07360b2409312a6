"""Stripe integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class StripeSettings(IntegrationSettings):
    """Stripe API configuration.

    Environment Variables:
        STRIPE_SECRET_KEY: Stripe secret API key (sk_*)
        STRIPE_API_VERSION: Pinned Stripe API version (optional)
        STRIPE_TIMEOUT: Request timeout in seconds (default: 60)
        STRIPE_MAX_NETWORK_RETRIES: SDK-level network retries (default: 3)
    """

    STRIPE_SECRET_KEY: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    STRIPE_API_VERSION: str | None = Field(default=None, alias="STRIPE_API_VERSION")
    STRIPE_TIMEOUT: int = Field(default=60, alias="STRIPE_TIMEOUT")
    STRIPE_MAX_NETWORK_RETRIES: int = Field(
        default=3, alias="STRIPE_MAX_NETWORK_RETRIES"
    )
