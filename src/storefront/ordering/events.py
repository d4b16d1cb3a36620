"""Domain events for the Cart and Ticket aggregates."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartProductAdded:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartQuantityUpdated:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartProductRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartProductsReplaced:
    __version__ = 1

    cart_id = Identifier(required=True)
    products = Text(required=True)  # JSON array of {product_id, quantity}


@storefront.event(part_of="Cart")
class CartEmptied:
    __version__ = 1

    cart_id = Identifier(required=True)
    emptied_at = DateTime(required=True)


@storefront.event(part_of="Ticket")
class TicketIssued:
    """A purchase went through and a ticket was generated for it."""

    __version__ = 1

    ticket_id = Identifier(required=True)
    code = String(required=True)
    cart_id = Identifier(required=True)
    purchaser = String(required=True)
    amount = Float(required=True)
    purchased_at = DateTime(required=True)
