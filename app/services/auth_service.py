# app/services/auth_service.py
import hmac
import logging
from typing import Any

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.ids import is_valid_id
from app.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    normalize_email,
    verify_password,
)
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import (
    AdminLoginResponse,
    AdminSummary,
    LoginResponse,
    RegisterRequest,
    UserSummary,
)

logger = logging.getLogger(__name__)

settings = get_settings()

REQUIRED_REGISTER_FIELDS = (
    "username",
    "email",
    "password",
    "confirm_password",
    "house_no",
    "street",
    "city",
    "state",
    "pincode",
    "country",
    "phone",
)


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class AuthService:
    """
    Registration, login and token checks.

    Responsibilities:
      - validate registration input and hash passwords
      - issue user-scoped tokens on login
      - check the fixed admin account and issue admin-scoped tokens
      - verify admin tokens for the admin routes
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- Customers -----

    def register(self, session: Session, payload: RegisterRequest) -> User:
        """
        Create a new account.

        Raises:
            ValidationError: a field is missing, passwords differ, or the
                email is malformed.
            ConflictError: the email is already registered.
        """
        if any(_blank(getattr(payload, f)) for f in REQUIRED_REGISTER_FIELDS):
            raise ValidationError("Please fill in all fields")

        if payload.password != payload.confirm_password:
            raise ValidationError("Passwords do not match")

        try:
            email = normalize_email(payload.email)
        except ValueError:
            raise ValidationError("Invalid email address")

        if self.repo.get_by_email(session, email) is not None:
            raise ConflictError("Email already registered")

        user = User(
            username=payload.username.strip(),
            email=email,
            password=hash_password(payload.password),
            house_no=payload.house_no,
            street=payload.street,
            city=payload.city,
            state=payload.state,
            pincode=payload.pincode,
            country=payload.country,
            phone=payload.phone,
        )
        try:
            user = self.repo.create(session, user)
        except IntegrityError:
            # Lost the race against a concurrent registration
            session.rollback()
            raise ConflictError("Email already registered")

        logger.info("Registered user %s", user.id)
        return user

    def login(
        self,
        session: Session,
        email: str | None,
        password: str | None,
    ) -> LoginResponse:
        if _blank(email) or _blank(password):
            raise ValidationError("Please fill in all fields")

        try:
            user = self.repo.get_by_email(session, normalize_email(email))
        except ValueError:
            user = None
        if user is None or not verify_password(password, user.password):
            logger.info("Failed login for %s", email)
            raise AuthError("Invalid credentials")

        summary = UserSummary(id=user.id, username=user.username, email=user.email)
        token = create_access_token({"user": summary.model_dump()}, scope="user")
        return LoginResponse(msg="Login successful", user=summary, token=token)

    def get_profile(self, session: Session, user_id: str) -> User:
        user = self.repo.get_by_id(session, user_id) if is_valid_id(user_id) else None
        if user is None:
            raise NotFoundError("User not found")
        return user

    # ----- Admin -----

    def admin_login(
        self,
        username: str | None,
        password: str | None,
    ) -> AdminLoginResponse:
        """
        Check the single admin account from settings.

        The admin is not a row in `users`; the token carries only the
        username and scope="admin".
        """
        if _blank(username) or _blank(password):
            raise ValidationError("Please fill in all fields")

        username_ok = hmac.compare_digest(
            username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8")
        )
        password_ok = hmac.compare_digest(
            password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8")
        )
        if not (username_ok and password_ok):
            logger.warning("Failed admin login for %s", username)
            raise AuthError("Invalid credentials")

        token = create_access_token({"username": username}, scope="admin")
        return AdminLoginResponse(
            message="Login successful",
            user=AdminSummary(username=username),
            token=token,
        )

    def verify_admin_token(self, token: str | None) -> dict[str, Any]:
        """
        Raises:
            AuthError(403): no token given.
            AuthError(401): invalid, expired, or not an admin token.
        """
        if not token:
            raise AuthError("No token provided", status_code=status.HTTP_403_FORBIDDEN)

        claims = decode_token(token)
        if claims is None or claims.get("scope") != "admin":
            raise AuthError("Unauthorized")
        return claims
