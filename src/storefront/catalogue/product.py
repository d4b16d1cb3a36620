"""Product aggregate: the catalogue document listed, carted and purchased."""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded, ProductDetailsUpdated, ProductStockReduced
from storefront.domain import storefront

# Fields a client may change after creation; ``id`` is never among them
UPDATABLE_FIELDS = (
    "title",
    "description",
    "code",
    "price",
    "status",
    "stock",
    "category",
    "thumbnails",
    "owner",
)


def _dump_thumbnails(thumbnails) -> str:
    if thumbnails is None:
        return json.dumps([])
    if isinstance(thumbnails, str):
        return json.dumps([thumbnails])
    if not isinstance(thumbnails, list | tuple) or not all(isinstance(t, str) for t in thumbnails):
        raise ValidationError({"thumbnails": ["Thumbnails must be a list of strings"]})
    return json.dumps(list(thumbnails))


@storefront.aggregate
class Product:
    title: String(required=True, max_length=255)
    description: Text(required=True)
    code: String(required=True, max_length=50, unique=True)
    price: Float(required=True, min_value=0.0)
    status: Boolean(default=True)
    stock: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    thumbnails: Text()  # JSON array of image URLs
    owner: String(max_length=255, default="admin")
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(
        cls,
        title,
        description,
        code,
        price,
        stock,
        category,
        status=True,
        thumbnails=None,
        owner=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            title=title,
            description=description,
            code=code,
            price=price,
            stock=stock,
            category=category,
            status=True if status is None else status,
            thumbnails=_dump_thumbnails(thumbnails),
            owner=owner or "admin",
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                code=code,
                title=title,
                price=price,
                stock=stock,
                category=category,
                added_at=now,
            )
        )
        return product

    @property
    def thumbnail_urls(self) -> list[str]:
        return json.loads(self.thumbnails) if self.thumbnails else []

    @property
    def is_available(self) -> bool:
        return bool(self.status) and (self.stock or 0) > 0

    def update_details(self, changes: dict):
        """Apply a partial update. Unknown fields and ``id`` are rejected."""
        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})
        if not changes:
            raise ValidationError({"product": ["No fields to update"]})

        for field, value in changes.items():
            if field == "thumbnails":
                value = _dump_thumbnails(value)
            elif value is None:
                raise ValidationError({field: ["Field cannot be set to null"]})
            setattr(self, field, value)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                changed_fields=json.dumps(sorted(changes)),
                updated_at=now,
            )
        )

    def reduce_stock(self, quantity):
        """Take ``quantity`` units out of stock for a purchase."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock:
            raise ValidationError({"stock": [f"Only {self.stock} units of {self.code} left in stock"]})

        self.stock -= quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductStockReduced(
                product_id=str(self.id),
                quantity=quantity,
                remaining_stock=self.stock,
            )
        )

    def to_document(self) -> dict:
        """JSON shape used by the API, the views and the live feed."""
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "code": self.code,
            "price": self.price,
            "status": self.status,
            "stock": self.stock,
            "category": self.category,
            "thumbnails": self.thumbnail_urls,
            "owner": self.owner,
        }
