# app/schemas/checkout.py
from pydantic import EmailStr
from sqlmodel import SQLModel


class CheckoutRequest(SQLModel):
    email: EmailStr | None = None


class CheckoutSessionRead(SQLModel):
    """Hosted payment page to redirect the browser to."""

    url: str
