# app/core/payment_client.py
from functools import lru_cache
from typing import Any, Protocol

import stripe

from app.core.config import get_settings

settings = get_settings()


class PaymentGatewayError(Exception):
    """Raised when a checkout session could not be created."""


class PaymentGateway(Protocol):
    def create_session(
        self,
        line_items: list[dict[str, Any]],
        customer_email: str | None,
    ) -> str:
        """Create a hosted checkout session and return its redirect URL."""
        ...


class StripeGateway:
    """
    Stripe Checkout implementation of PaymentGateway.

    Uses a per-call api_key instead of the global `stripe.api_key`
    so nothing leaks between configurations (and tests).
    """

    def __init__(self, api_key: str | None, success_url: str, cancel_url: str):
        self.api_key = api_key
        self.success_url = success_url
        self.cancel_url = cancel_url

    def create_session(
        self,
        line_items: list[dict[str, Any]],
        customer_email: str | None,
    ) -> str:
        if not self.api_key:
            raise PaymentGatewayError("Missing STRIPE_SECRET_KEY in .env")

        params: dict[str, Any] = {
            "payment_method_types": ["card"],
            "line_items": line_items,
            "mode": "payment",
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
        }
        if customer_email:
            params["customer_email"] = customer_email

        try:
            session = stripe.checkout.Session.create(api_key=self.api_key, **params)
        except stripe.StripeError as e:
            raise PaymentGatewayError(str(e)) from e

        if not session.url:
            raise PaymentGatewayError("Stripe returned a session without a URL")
        return session.url


@lru_cache
def stripe_gateway() -> StripeGateway:
    """
    Shared StripeGateway built from settings.

    Exposed as a FastAPI dependency so tests can override it.
    """
    return StripeGateway(
        api_key=settings.STRIPE_SECRET_KEY,
        success_url=settings.CHECKOUT_SUCCESS_URL,
        cancel_url=settings.CHECKOUT_CANCEL_URL,
    )
