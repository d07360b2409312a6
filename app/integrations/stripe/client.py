import stripe

from infrastructure.configuration import StripeSettings


def build_stripe_client(stripe_settings: StripeSettings) -> stripe.StripeClient:
    """Create a StripeClient from settings.

    Raises:
        ConfigurationError: STRIPE_SECRET_KEY is not set
    """
    # Import here to avoid circular dependency at module level
    from infrastructure.notifications.errors import ConfigurationError

    if not stripe_settings.STRIPE_SECRET_KEY:
        raise ConfigurationError("Stripe secret key not configured")

    return stripe.StripeClient(
        stripe_settings.STRIPE_SECRET_KEY,
        stripe_version=stripe_settings.STRIPE_API_VERSION,
        max_network_retries=stripe_settings.STRIPE_MAX_NETWORK_RETRIES,
        http_client=stripe.HTTPXClient(
            timeout=stripe_settings.STRIPE_TIMEOUT, allow_sync_methods=True
        ),
    )
