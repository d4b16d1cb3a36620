"""Cart purchase: turns the purchasable lines of a cart into a ticket.

A line is purchasable when its product still exists, is active and has enough
stock. Purchasable lines reduce stock and leave the cart; the others stay in
the cart and are reported back so the shopper can adjust them.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.ordering.cart import Cart
from storefront.ordering.lookup import find_product, load_cart
from storefront.ordering.ticket import Ticket

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class PurchaseCart:
    cart_id = Identifier(required=True)
    purchaser = String(required=True, max_length=254)


@storefront.command_handler(part_of=Cart)
class PurchaseCartHandler:
    @handle(PurchaseCart)
    def purchase_cart(self, command):
        cart = load_cart(command.cart_id)
        product_repo = current_domain.repository_for(Product)

        purchased = []
        unavailable = []
        for product_id, quantity in [(str(i.product_id), i.quantity) for i in cart.items]:
            product = find_product(product_id)
            if product is None or not product.is_available or product.stock < quantity:
                unavailable.append(product_id)
                continue

            product.reduce_stock(quantity)
            product_repo.add(product)
            cart.remove_product(product_id)
            purchased.append(
                {
                    "product_id": product_id,
                    "title": product.title,
                    "quantity": quantity,
                    "unit_price": product.price,
                    "subtotal": round(product.price * quantity, 2),
                }
            )

        if not purchased:
            logger.info("Nothing purchasable in cart", cart_id=command.cart_id, unavailable=unavailable)
            return {"ticket": None, "unavailable_products": unavailable}

        ticket = Ticket.issue(cart_id=command.cart_id, purchaser=command.purchaser, lines=purchased)
        current_domain.repository_for(Ticket).add(ticket)
        current_domain.repository_for(Cart).add(cart)

        logger.info(
            "Cart purchased",
            cart_id=command.cart_id,
            ticket_code=ticket.code,
            amount=ticket.amount,
            unavailable=unavailable,
        )
        return {"ticket": ticket.to_document(), "unavailable_products": unavailable}
