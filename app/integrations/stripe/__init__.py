"""Stripe Integration Package.

- client: StripeClient factory configured from settings.
- payments: Connected-account status and checkout-session verification.
- errors: Translation of Stripe SDK errors into HTTP status codes.
"""
