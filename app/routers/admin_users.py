# app/routers/admin_users.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.schemas.cart import CartItemRead
from app.schemas.common import MessageResponse
from app.schemas.product import ProductRead
from app.schemas.user import UserListResponse, UserRead, UserUpdate
from app.services.product_service import ProductService
from app.services.user_service import UserService

router = APIRouter(
    prefix="/api",
    tags=["Admin Users"],
    dependencies=[Depends(require_admin)],
)

service = UserService(UserRepository(), CartRepository())
product_service = ProductService(ProductRepository())


@router.get("/users", response_model=UserListResponse)
def list_users(session: Session = Depends(get_session)):
    """
    All users with total and active counts (admin dashboard).
    """
    return service.list_users(session)


@router.delete("/usersdelet/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    session: Session = Depends(get_session),
):
    """
    Delete a user together with their cart.
    """
    service.delete_user(session, user_id)
    return MessageResponse(message="User deleted successfully")


@router.put("/usersupdate/{user_id}", response_model=MessageResponse)
def update_user(
    user_id: str,
    payload: UserUpdate,
    session: Session = Depends(get_session),
):
    """
    Change username and/or email.
    """
    service.update_user(session, user_id, payload)
    return MessageResponse(message="User updated successfully.")


@router.get("/usersshowdetails/{user_id}", response_model=UserRead)
def get_user_details(
    user_id: str,
    session: Session = Depends(get_session),
):
    return service.get_user(session, user_id)


@router.get("/usercartdetails/{user_id}", response_model=list[CartItemRead])
def get_user_cart(
    user_id: str,
    session: Session = Depends(get_session),
):
    """
    Raw cart rows of a user. An empty cart is `[]`, not a 404.
    """
    return service.get_user_cart(session, user_id)


@router.get("/userproductdetails/{product_id}", response_model=ProductRead)
def get_product_details(
    product_id: str,
    session: Session = Depends(get_session),
):
    return product_service.get_product(session, product_id)
