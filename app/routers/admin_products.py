# app/routers/admin_products.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.common import MessageResponse
from app.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
    ProductUpdated,
)
from app.services.product_service import ProductService

router = APIRouter(
    prefix="/api",
    tags=["Admin Products"],
    dependencies=[Depends(require_admin)],
)

repo = ProductRepository()
service = ProductService(repo)


@router.get("/products", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    return service.list_products(session)


@router.post(
    "/productsadd",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a product. `img` and `name` are required.
    """
    return service.create_product(session, payload)


@router.put("/products/{product_id}", response_model=ProductUpdated)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Partial update. 400 on a malformed id, 404 if it does not exist.
    """
    product = service.update_product(session, product_id, payload)
    return ProductUpdated(
        message="Product updated successfully!",
        product=ProductRead.model_validate(product),
    )


@router.delete("/products/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str,
    session: Session = Depends(get_session),
):
    service.delete_product(session, product_id)
    return MessageResponse(message="Product deleted successfully")
