# app/repositories/cart_repo.py
from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.cart import CartItem
from app.models.product import Product


class CartRepository:
    """
    Data access layer for CartItem.

    Quantity changes are single UPDATE statements (quantity = quantity + n)
    so two concurrent requests on the same row cannot lose an update.
    """

    # Get items for a user
    def list_for_user(self, session: Session, user_id: str) -> list[CartItem]:
        stmt = (
            select(CartItem)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.created_at)
        )
        return session.exec(stmt).all()

    def list_with_products(
        self, session: Session, user_id: str
    ) -> list[tuple[CartItem, Product]]:
        """
        Inner join of the user's cart rows with their products.
        Rows pointing at a deleted product are skipped.
        """
        stmt = (
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.created_at)
        )
        return session.exec(stmt).all()

    def get_for_user(
        self, session: Session, user_id: str, item_id: str
    ) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.id == item_id, CartItem.user_id == user_id
        )
        return session.exec(stmt).first()

    # ----- Atomic quantity changes -----

    def add_quantity(
        self,
        session: Session,
        *,
        user_id: str,
        product_id: str,
        quantity: int,
    ) -> None:
        """
        Increase the (user, product) row by `quantity`, inserting it if absent.

        A concurrent insert of the same pair hits the unique constraint;
        in that case the row now exists and we increment it instead.
        """
        stmt = (
            update(CartItem)
            .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
            .values(quantity=CartItem.quantity + quantity)
        )
        if session.execute(stmt).rowcount:
            session.commit()
            return

        session.add(CartItem(user_id=user_id, product_id=product_id, quantity=quantity))
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            session.execute(stmt)
            session.commit()

    def increment(self, session: Session, user_id: str, item_id: str) -> bool:
        """Add 1. Returns False if no such row."""
        stmt = (
            update(CartItem)
            .where(CartItem.id == item_id, CartItem.user_id == user_id)
            .values(quantity=CartItem.quantity + 1)
        )
        changed = session.execute(stmt).rowcount > 0
        session.commit()
        return changed

    def decrement(self, session: Session, user_id: str, item_id: str) -> bool:
        """Subtract 1 only while quantity > 1. Returns False if nothing changed."""
        stmt = (
            update(CartItem)
            .where(
                CartItem.id == item_id,
                CartItem.user_id == user_id,
                CartItem.quantity > 1,
            )
            .values(quantity=CartItem.quantity - 1)
        )
        changed = session.execute(stmt).rowcount > 0
        session.commit()
        return changed

    # ----- Deletes -----

    def delete_for_user(self, session: Session, user_id: str, item_id: str) -> int:
        stmt = delete(CartItem).where(
            CartItem.id == item_id, CartItem.user_id == user_id
        )
        deleted = session.execute(stmt).rowcount
        session.commit()
        return deleted

    def clear_user_cart(self, session: Session, user_id: str) -> int:
        stmt = delete(CartItem).where(CartItem.user_id == user_id)
        deleted = session.execute(stmt).rowcount
        session.commit()
        return deleted
