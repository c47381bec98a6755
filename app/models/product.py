# app/models/product.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

from app.core.ids import new_id


class Product(SQLModel, table=True):
    """
    Catalog entry.

    img and name are required on creation (checked in ProductService);
    price and rating default to 0.
    """

    __tablename__ = "products"

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        max_length=24,
    )

    img: str = Field(description="Image URL or path")

    name: str = Field(index=True)

    price: float = Field(
        default=0,
        ge=0,
        description="Unit price in major currency units (e.g. USD)",
    )

    desc: str | None = None

    category: str | None = Field(default=None, index=True)

    rating: float = Field(default=0)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
