# app/routers/auth.py
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import auth_service, require_admin
from app.database import get_session
from app.schemas.auth import (
    AdminLoginRequest,
    AdminLoginResponse,
    AuthCheckResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(tags=["Auth"])


# -------- Customers --------


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
):
    """
    Create a customer account.

    - 400 if a field is missing or passwords do not match
    - 409 if the email is already registered
    """
    auth_service.register(session, payload)
    return RegisterResponse(msg="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Exchange email/password for a 1 hour user token.
    """
    return auth_service.login(session, payload.email, payload.password)


# -------- Admin --------


@router.post("/adminlogin", response_model=AdminLoginResponse)
def admin_login(payload: AdminLoginRequest):
    """
    Log in as the configured admin account.
    """
    return auth_service.admin_login(payload.username, payload.password)


@router.get("/isAuth", response_model=AuthCheckResponse)
def is_auth(claims: dict[str, Any] = Depends(require_admin)):
    """
    Check the admin token sent in `x-access-token`.
    """
    return AuthCheckResponse(user=claims)
