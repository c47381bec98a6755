# app/schemas/cart.py
from datetime import datetime

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.

    Both fields are optional here so CartService can answer a
    missing field with 400 "Missing required fields".
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str | None = None
    quantity: int | None = None


class CartItemRead(SQLModel):
    """
    Raw cart row (admin view, increment/decrement responses).
    """

    id: str
    user_id: str
    product_id: str
    quantity: int
    created_at: datetime


class CartProduct(SQLModel):
    name: str
    price: float
    img: str


class CartLine(SQLModel):
    """
    One row of the customer's cart joined with its product.
    """

    id: str
    quantity: int
    product: CartProduct


class CartItemChanged(SQLModel):
    message: str
    cart_item: CartItemRead
