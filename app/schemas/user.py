# app/schemas/user.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class UserRead(SQLModel):
    """
    Response schema returned to clients.
    The password hash is deliberately absent.

    Serialized with camelCase keys (houseNo, isActive, createdAt).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    email: str
    house_no: str
    street: str
    city: str
    state: str
    pincode: str
    country: str
    phone: str
    is_active: bool
    created_at: datetime


class UserUpdate(SQLModel):
    """
    Admin partial update: only username and email are editable.
    The email format is checked by UserService (400, not 422).
    """

    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(default=None, max_length=100)
    email: str | None = None

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty")
        return v


class UserListResponse(SQLModel):
    """Admin dashboard payload: every user plus headline counts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_users: int
    active_users_count: int
    users: list[UserRead]
