# app/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.payment_client import PaymentGateway, stripe_gateway
from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.schemas.checkout import CheckoutRequest, CheckoutSessionRead
from app.services.checkout_service import CheckoutService

router = APIRouter(tags=["Checkout"])

cart_repo = CartRepository()
service = CheckoutService(cart_repo)


@router.post(
    "/create-checkout-session/{user_id}",
    response_model=CheckoutSessionRead,
)
def create_checkout_session(
    user_id: str,
    payload: CheckoutRequest | None = None,
    session: Session = Depends(get_session),
    gateway: PaymentGateway = Depends(stripe_gateway),
):
    """
    Create a Stripe Checkout session for the user's cart.

    - 400 if the cart is empty
    - 502 if Stripe rejects the request
    The body (and its email) is optional.
    The cart itself is not cleared.
    """
    url = service.create_checkout_session(
        session,
        user_id,
        str(payload.email) if payload and payload.email else None,
        gateway,
    )
    return CheckoutSessionRead(url=url)
