# app/services/user_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.core.ids import is_valid_id
from app.core.security import normalize_email
from app.models.cart import CartItem
from app.models.user import User
from app.repositories.cart_repo import CartRepository
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserListResponse, UserRead, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """
    Admin operations on customer accounts.

    Responsibilities:
      - dashboard listing with total/active counts
      - username/email edits (email stays unique)
      - delete with cascade to the user's cart rows
    """

    def __init__(self, repo: UserRepository, cart_repo: CartRepository):
        self.repo = repo
        self.cart_repo = cart_repo

    def list_users(self, session: Session) -> UserListResponse:
        users = self.repo.list(session)
        return UserListResponse(
            total_users=len(users),
            active_users_count=self.repo.count_active(session),
            users=[UserRead.model_validate(u) for u in users],
        )

    def get_user(self, session: Session, user_id: str) -> User:
        """
        Raises:
            NotFoundError: unknown (or malformed) id.
        """
        user = self.repo.get_by_id(session, user_id) if is_valid_id(user_id) else None
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_user(
        self,
        session: Session,
        user_id: str,
        payload: UserUpdate,
    ) -> User:
        """
        Partial update of username and/or email.
        """
        user = self.get_user(session, user_id)

        if payload.email is not None:
            try:
                email = normalize_email(payload.email)
            except ValueError:
                raise ValidationError("Invalid email address")
            other = self.repo.get_by_email(session, email)
            if other is not None and other.id != user.id:
                raise ConflictError("Email already registered")
            user.email = email

        if payload.username is not None:
            user.username = payload.username

        try:
            return self.repo.update(session, user)
        except IntegrityError:
            session.rollback()
            raise ConflictError("Email already registered")

    def delete_user(self, session: Session, user_id: str) -> None:
        """
        Delete the user's cart rows, then the user.

        Two separate commits: if the second step fails the user
        survives with an empty cart, which is harmless.
        Unknown ids are a no-op.
        """
        removed = self.cart_repo.clear_user_cart(session, user_id)
        user = self.repo.get_by_id(session, user_id)
        if user is not None:
            self.repo.delete(session, user)
        logger.info("Deleted user %s (%d cart rows)", user_id, removed)

    def get_user_cart(self, session: Session, user_id: str) -> list[CartItem]:
        """Raw cart rows; an empty cart is an empty list."""
        return self.cart_repo.list_for_user(session, user_id)
