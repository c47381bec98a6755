# app/routers/cart.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartItemChanged, CartItemCreate, CartItemRead, CartLine
from app.schemas.common import MessageResponse
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.post("/{user_id}", response_model=MessageResponse)
def add_to_cart(
    user_id: str,
    payload: CartItemCreate,
    session: Session = Depends(get_session),
):
    """
    Add `quantity` of a product; repeated adds accumulate.
    """
    service.add_item(session, user_id, payload)
    return MessageResponse(message="Cart updated successfully!")


@router.get("/{user_id}", response_model=list[CartLine])
def get_cart(
    user_id: str,
    session: Session = Depends(get_session),
):
    """
    Cart rows joined with product name/price/img.

    404 "Cart is empty" when there is nothing in the cart.
    """
    return service.list_items(session, user_id)


@router.delete("/{user_id}/{cart_item_id}", response_model=MessageResponse)
def remove_cart_item(
    user_id: str,
    cart_item_id: str,
    session: Session = Depends(get_session),
):
    service.remove_item(session, user_id, cart_item_id)
    return MessageResponse(message="Item removed from cart")


@router.put("/{user_id}/increment/{cart_item_id}", response_model=CartItemChanged)
def increment_cart_item(
    user_id: str,
    cart_item_id: str,
    session: Session = Depends(get_session),
):
    item = service.increment(session, user_id, cart_item_id)
    return CartItemChanged(
        message="Item quantity incremented",
        cart_item=CartItemRead.model_validate(item),
    )


@router.put("/{user_id}/decrement/{cart_item_id}", response_model=CartItemChanged)
def decrement_cart_item(
    user_id: str,
    cart_item_id: str,
    session: Session = Depends(get_session),
):
    """
    Subtract 1. At quantity 1 this is a 400; use DELETE to remove.
    """
    item = service.decrement(session, user_id, cart_item_id)
    return CartItemChanged(
        message="Item quantity decremented",
        cart_item=CartItemRead.model_validate(item),
    )


@router.delete("/{user_id}", response_model=MessageResponse)
def clear_cart(
    user_id: str,
    session: Session = Depends(get_session),
):
    service.clear(session, user_id)
    return MessageResponse(message="Cart cleared")
