"""Cart aggregate: a list of product lines a shopper intends to buy.

Lines are keyed by product id; adding a product that is already in the cart
increases its quantity instead of adding a second line.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.errors import ErrorCode, StorefrontError
from storefront.ordering.events import (
    CartEmptied,
    CartProductAdded,
    CartProductRemoved,
    CartProductsReplaced,
    CartQuantityUpdated,
)


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class Cart:
    items = HasMany(CartItem)
    owner_email = String(max_length=254)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, owner_email=None):
        now = datetime.now(UTC)
        return cls(owner_email=owner_email, created_at=now, updated_at=now)

    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _require_line(self, product_id):
        line = self.line_for(product_id)
        if line is None:
            raise StorefrontError(ErrorCode.PRODUCT_NOT_IN_CART, cause=f"Product {product_id} is not in the cart")
        return line

    def add_product(self, product_id, quantity=1):
        """Add ``quantity`` units of a product (or increase an existing line)."""
        if quantity < 1:
            raise StorefrontError(ErrorCode.INVALID_QUANTITY, cause=f"Got {quantity!r}")

        now = datetime.now(UTC)
        line = self.line_for(product_id)
        if line:
            line.quantity += quantity
        else:
            line = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(line)
        self.updated_at = now

        self.raise_(
            CartProductAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=line.quantity,
            )
        )

    def update_quantity(self, product_id, quantity):
        if quantity < 1:
            raise StorefrontError(ErrorCode.INVALID_QUANTITY, cause=f"Got {quantity!r}")

        line = self._require_line(product_id)
        previous_quantity = line.quantity
        line.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_product(self, product_id):
        line = self._require_line(product_id)
        self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartProductRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def replace_products(self, lines):
        """Replace every line with ``lines`` (dicts of product_id and quantity).

        Repeated product ids are merged into one line.
        """
        merged: dict[str, int] = {}
        for entry in lines:
            quantity = entry.get("quantity", 1)
            if not isinstance(quantity, int) or quantity < 1:
                raise StorefrontError(ErrorCode.INVALID_QUANTITY, cause=f"Got {quantity!r}")
            product_id = str(entry["product_id"])
            merged[product_id] = merged.get(product_id, 0) + quantity

        for line in list(self.items):
            self.remove_items(line)

        now = datetime.now(UTC)
        for product_id, quantity in merged.items():
            self.add_items(CartItem(product_id=product_id, quantity=quantity, added_at=now))
        self.updated_at = now

        self.raise_(
            CartProductsReplaced(
                cart_id=str(self.id),
                products=json.dumps([{"product_id": pid, "quantity": qty} for pid, qty in merged.items()]),
            )
        )

    def empty(self):
        for line in list(self.items):
            self.remove_items(line)
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(CartEmptied(cart_id=str(self.id), emptied_at=now))

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "owner_email": self.owner_email,
            "products": [{"product_id": str(i.product_id), "quantity": i.quantity} for i in self.items],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
