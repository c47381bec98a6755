# app/schemas/auth.py
from typing import Any

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class RegisterRequest(SQLModel):
    """
    Registration payload.

    Every field is optional at the schema level: presence and
    password confirmation are checked by AuthService so a missing
    field is a 400 with a readable message, not a 422.

    Accepts both snake_case and camelCase keys (confirmPassword, houseNo).
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    username: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    house_no: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    country: str | None = None
    phone: str | None = None


class RegisterResponse(SQLModel):
    msg: str


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    password: str | None = None


class UserSummary(SQLModel):
    """Public identity embedded in user tokens."""

    id: str
    username: str
    email: str


class LoginResponse(SQLModel):
    login: bool = True
    msg: str
    user: UserSummary
    token: str


class AdminLoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    username: str | None = None
    password: str | None = None


class AdminSummary(SQLModel):
    username: str


class AdminLoginResponse(SQLModel):
    login: bool = True
    message: str
    user: AdminSummary
    token: str


class AuthCheckResponse(SQLModel):
    login: bool = True
    user: dict[str, Any]
