# app/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

from app.core.ids import new_id


class User(SQLModel, table=True):
    """
    Registered customer account.

    - password holds the bcrypt hash, never the plain text, and is
      never part of a response model.
    - the admin account is NOT a row here; it comes from settings.
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        max_length=24,
    )

    username: str = Field(max_length=100)

    email: str = Field(
        unique=True,
        index=True,
    )

    password: str = Field(description="bcrypt hash")

    # Postal address
    house_no: str
    street: str
    city: str
    state: str
    pincode: str
    country: str

    phone: str

    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
