# app/routers/users.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import auth_service
from app.database import get_session
from app.schemas.user import UserRead

router = APIRouter(tags=["Users"])


@router.get("/myprofile/{user_id}", response_model=UserRead)
def read_profile(
    user_id: str,
    session: Session = Depends(get_session),
):
    """
    Return a customer's own profile (without the password hash).
    """
    return auth_service.get_profile(session, user_id)
