"""Cart management: creation and emptying."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart import Cart
from storefront.ordering.lookup import load_cart

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class CreateCart:
    """Create a new, empty cart. Registered users get one on sign-up."""

    owner_email = String(max_length=254)


@storefront.command(part_of="Cart")
class EmptyCart:
    cart_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(owner_email=command.owner_email)
        current_domain.repository_for(Cart).add(cart)
        logger.debug("Cart created", cart_id=str(cart.id), owner_email=command.owner_email)
        return str(cart.id)

    @handle(EmptyCart)
    def empty_cart(self, command):
        cart = load_cart(command.cart_id)
        cart.empty()
        current_domain.repository_for(Cart).add(cart)
        return cart.to_document()
