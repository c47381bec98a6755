# app/models/cart.py
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

from app.core.ids import new_id


class CartItem(SQLModel, table=True):
    """
    Shopping cart entry for a user.
    One user cannot have 2 rows for the same product.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
    )

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        max_length=24,
    )

    # Plain references: rows are resolved by join at read time
    user_id: str = Field(index=True, max_length=24)

    product_id: str = Field(index=True, max_length=24)

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
