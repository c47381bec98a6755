# app/schemas/common.py
from sqlmodel import SQLModel


class MessageResponse(SQLModel):
    """Plain acknowledgement for operations that return no payload."""

    message: str
