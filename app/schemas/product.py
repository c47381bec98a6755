# app/schemas/product.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    img and name are checked by ProductService (400 if missing);
    price and rating fall back to 0.
    """

    model_config = ConfigDict(extra="forbid")

    img: str | None = None
    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    desc: str | None = None
    category: str | None = None
    rating: float | None = None


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.
    All fields are optional.
    """

    model_config = ConfigDict(extra="forbid")

    img: str | None = None
    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    desc: str | None = None
    category: str | None = None
    rating: float | None = None


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: str
    img: str
    name: str
    price: float
    desc: str | None = None
    category: str | None = None
    rating: float
    created_at: datetime


class ProductUpdated(SQLModel):
    message: str
    product: ProductRead
