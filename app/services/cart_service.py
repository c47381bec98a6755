# app/services/cart_service.py
from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.ids import is_valid_id
from app.models.cart import CartItem
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartItemCreate, CartLine, CartProduct


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate ids and quantities
      - cumulative add (repeated adds accumulate into one row)
      - keep quantity >= 1 on decrement; removal is explicit
      - join cart rows with products for display
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    @staticmethod
    def _check_user_id(user_id: str) -> None:
        if not is_valid_id(user_id):
            raise ValidationError("Invalid User ID")

    @staticmethod
    def _check_item_id(cart_item_id: str) -> None:
        if not is_valid_id(cart_item_id):
            raise ValidationError("Invalid Cart Item ID")

    def _get_item(self, session: Session, user_id: str, cart_item_id: str) -> CartItem:
        self._check_user_id(user_id)
        self._check_item_id(cart_item_id)
        item = self.cart_repo.get_for_user(session, user_id, cart_item_id)
        if item is None:
            raise NotFoundError("Cart item not found")
        return item

    # ---- public operations ----

    def add_item(
        self,
        session: Session,
        user_id: str,
        payload: CartItemCreate,
    ) -> None:
        """
        Add `quantity` of a product to the user's cart.

        If the product is already in the cart its quantity grows by
        `quantity` (adds accumulate, they do not replace).
        """
        if not payload.product_id or not payload.quantity:
            raise ValidationError("Missing required fields")

        self._check_user_id(user_id)
        if not is_valid_id(payload.product_id):
            raise ValidationError("Invalid Product ID")
        if payload.quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        if self.product_repo.get_by_id(session, payload.product_id) is None:
            raise NotFoundError("Product not found")

        self.cart_repo.add_quantity(
            session,
            user_id=user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )

    def _lines(self, session: Session, user_id: str) -> list[CartLine]:
        """Cart rows joined with name/price/img of their product."""
        self._check_user_id(user_id)
        rows = self.cart_repo.list_with_products(session, user_id)
        return [
            CartLine(
                id=item.id,
                quantity=item.quantity,
                product=CartProduct(
                    name=product.name,
                    price=product.price,
                    img=product.img,
                ),
            )
            for item, product in rows
        ]

    def list_items(self, session: Session, user_id: str) -> list[CartLine]:
        """
        Customer cart view.

        Raises:
            NotFoundError: the cart is empty.
        """
        lines = self._lines(session, user_id)
        if not lines:
            raise NotFoundError("Cart is empty")
        return lines

    def remove_item(self, session: Session, user_id: str, cart_item_id: str) -> None:
        """
        Delete one row. Succeeds even if nothing matched.
        """
        self._check_user_id(user_id)
        self._check_item_id(cart_item_id)
        self.cart_repo.delete_for_user(session, user_id, cart_item_id)

    def increment(self, session: Session, user_id: str, cart_item_id: str) -> CartItem:
        item = self._get_item(session, user_id, cart_item_id)
        if not self.cart_repo.increment(session, user_id, item.id):
            raise NotFoundError("Cart item not found")
        session.refresh(item)
        return item

    def decrement(self, session: Session, user_id: str, cart_item_id: str) -> CartItem:
        """
        Subtract 1; fails at quantity 1 instead of clamping or deleting.
        """
        item = self._get_item(session, user_id, cart_item_id)
        if not self.cart_repo.decrement(session, user_id, cart_item_id):
            # Nothing changed: either the row is gone or it sits at 1
            if self.cart_repo.get_for_user(session, user_id, cart_item_id) is None:
                raise NotFoundError("Cart item not found")
            raise ValidationError("Quantity cannot be less than 1")
        session.refresh(item)
        return item

    def clear(self, session: Session, user_id: str) -> None:
        self._check_user_id(user_id)
        self.cart_repo.clear_user_cart(session, user_id)

