# app/routers/products.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductRead
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    List the whole catalog. Public endpoint.
    """
    return service.list_products(session)
