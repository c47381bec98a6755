# app/services/product_service.py
from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.ids import is_valid_id
from app.models.product import Product
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate


class ProductService:
    """
    Business logic for the catalog.

    Responsibilities:
      - required fields on create (img, name), zero defaults
      - id format checks before touching the store
      - admin-only operations (enforced at router via require_admin)
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list(session)

    def get_product(self, session: Session, product_id: str) -> Product:
        product = self.repo.get_by_id(session, product_id) if is_valid_id(product_id) else None
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def create_product(
        self,
        session: Session,
        payload: ProductCreate,
    ) -> Product:
        if not payload.img or not payload.name:
            raise ValidationError("Image and Name are required!")

        product = Product(
            img=payload.img,
            name=payload.name.strip(),
            price=payload.price or 0,
            desc=payload.desc,
            category=payload.category,
            rating=payload.rating or 0,
        )
        return self.repo.create(session, product)

    def update_product(
        self,
        session: Session,
        product_id: str,
        payload: ProductUpdate,
    ) -> Product:
        """
        Partial update of a product.

        The id format is checked first so a malformed id is a 400,
        never a store round trip.
        """
        if not is_valid_id(product_id):
            raise ValidationError("Invalid product ID")

        product = self.get_product(session, product_id)

        if payload.img is not None:
            product.img = payload.img

        if payload.name is not None:
            product.name = payload.name

        if payload.price is not None:
            product.price = payload.price

        if payload.desc is not None:
            product.desc = payload.desc

        if payload.category is not None:
            product.category = payload.category

        if payload.rating is not None:
            product.rating = payload.rating

        return self.repo.update(session, product)

    def delete_product(
        self,
        session: Session,
        product_id: str,
    ) -> None:
        """
        Delete a product; unknown ids are a no-op.

        Cart rows pointing at it stay behind and drop out of the
        joined cart view.
        """
        product = self.repo.get_by_id(session, product_id)
        if product is not None:
            self.repo.delete(session, product)
