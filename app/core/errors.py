# app/core/errors.py
"""
Domain errors raised by services.

Each one is an HTTPException so FastAPI renders it as
``{"detail": <message>}`` with the matching status code, the same way
services raise HTTPException directly.
"""
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed input."""

    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthError(HTTPException):
    """Bad credentials, or a missing/invalid/expired token."""

    def __init__(
        self,
        detail: str = "Unauthorized",
        status_code: int = status.HTTP_401_UNAUTHORIZED,
    ):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ExternalServiceError(HTTPException):
    """The payment processor (or another remote API) failed."""

    def __init__(self, detail: str = "External service failed"):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


class StoreError(HTTPException):
    """Any persistence failure not covered above."""

    def __init__(self, detail: str = "Database error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
