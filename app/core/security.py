# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

import bcrypt
from email_validator import EmailNotValidError, validate_email
from jose import jwt, JWTError

from app.core.config import get_settings

settings = get_settings()

# Tokens carry a scope so a customer token can never pass an admin check.
Scope = Literal["user", "admin"]


def hash_password(password: str) -> str:
    """One-way, salted bcrypt hash; stored as a utf-8 string."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def normalize_email(value: str) -> str:
    """
    Canonical form used for storage and lookup: validated, then lowercased.

    Registration, login and admin edits all go through here so the
    same address always maps to the same row.

    Raises:
        ValueError: not a valid email address.
    """
    try:
        info = validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return info.normalized.lower()


def create_access_token(claims: dict[str, Any], scope: Scope) -> str:
    """
    Sign `claims` with JWT_SECRET.

    Adds:
      - scope: "user" | "admin"
      - exp: now + ACCESS_TOKEN_EXPIRE_MINUTES (1 hour by default)
    """
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {**claims, "scope": scope, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_token(token: str) -> dict[str, Any] | None:
    """
    Verify signature and expiry.

    Returns:
        Decoded claims, or None if the token is invalid/expired.
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError:
        return None
