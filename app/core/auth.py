# app/core/auth.py
from typing import Any

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.repositories.user_repo import UserRepository
from app.services.auth_service import AuthService

# Admin token header:
# - auto_error=False => a missing header does NOT raise immediately,
#   AuthService decides (403 "No token provided").
admin_token_header = APIKeyHeader(name="x-access-token", auto_error=False)

auth_service = AuthService(UserRepository())


def require_admin(
    token: str | None = Depends(admin_token_header),
) -> dict[str, Any]:
    """
    Enforce an admin-scoped token in `x-access-token`.

    Returns:
        The decoded admin claims.

    Raises:
        AuthError(403): header missing.
        AuthError(401): token invalid, expired, or not admin-scoped.
    """
    return auth_service.verify_admin_token(token)
