"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    code: String(required=True)
    title: String(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    category: String(required=True)
    added_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """One or more product fields were changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: Text(required=True)  # JSON array of field names
    updated_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductStockReduced:
    """Units were taken out of stock by a purchase."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    remaining_stock: Integer(required=True)
