# app/services/checkout_service.py
import logging
from typing import Any

from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import ExternalServiceError, ValidationError
from app.core.ids import is_valid_id
from app.core.payment_client import PaymentGateway, PaymentGatewayError
from app.repositories.cart_repo import CartRepository

logger = logging.getLogger(__name__)

settings = get_settings()


def to_minor_units(price: float) -> int:
    """Major currency units -> integer cents (10.0 -> 1000)."""
    return int(round(price * 100))


class CheckoutService:
    """
    Turns the current cart into a hosted payment session.

    Read-only with respect to the store: the cart is left untouched,
    clearing it after payment is not handled here.
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    def build_line_items(
        self,
        session: Session,
        user_id: str,
    ) -> list[dict[str, Any]]:
        """
        One payment line item per cart row, priced in minor units.

        Raises:
            ValidationError: the cart is empty.
        """
        rows = self.cart_repo.list_with_products(session, user_id)
        if not rows:
            raise ValidationError("Cart is empty")

        return [
            {
                "price_data": {
                    "currency": settings.CHECKOUT_CURRENCY,
                    "product_data": {
                        "name": product.name,
                        "images": [product.img],
                    },
                    "unit_amount": to_minor_units(product.price),
                },
                "quantity": item.quantity,
            }
            for item, product in rows
        ]

    def create_checkout_session(
        self,
        session: Session,
        user_id: str,
        email: str | None,
        gateway: PaymentGateway,
    ) -> str:
        """
        Create the payment session and return its redirect URL.

        Raises:
            ValidationError: bad user id or empty cart.
            ExternalServiceError: the payment processor call failed.
        """
        if not is_valid_id(user_id):
            raise ValidationError("Invalid User ID")

        line_items = self.build_line_items(session, user_id)

        try:
            url = gateway.create_session(line_items, customer_email=email)
        except PaymentGatewayError as e:
            logger.error("Checkout session failed for user %s: %s", user_id, e)
            raise ExternalServiceError("Failed to create checkout session")

        logger.info(
            "Checkout session created for user %s (%d line items)",
            user_id,
            len(line_items),
        )
        return url
