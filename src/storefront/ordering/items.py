"""Cart line management: commands and handler."""

import json

from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart import Cart
from storefront.ordering.lookup import load_cart, load_product


@storefront.command(part_of="Cart")
class AddProductToCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartProductQuantity:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveProductFromCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ReplaceCartProducts:
    cart_id = Identifier(required=True)
    products = Text(required=True)  # JSON array of {product_id, quantity}


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        cart = load_cart(command.cart_id)
        load_product(command.product_id)
        cart.add_product(command.product_id, command.quantity or 1)
        current_domain.repository_for(Cart).add(cart)
        return cart.to_document()

    @handle(UpdateCartProductQuantity)
    def update_cart_product_quantity(self, command):
        cart = load_cart(command.cart_id)
        cart.update_quantity(command.product_id, command.quantity)
        current_domain.repository_for(Cart).add(cart)
        return cart.to_document()

    @handle(RemoveProductFromCart)
    def remove_product_from_cart(self, command):
        cart = load_cart(command.cart_id)
        cart.remove_product(command.product_id)
        current_domain.repository_for(Cart).add(cart)
        return cart.to_document()

    @handle(ReplaceCartProducts)
    def replace_cart_products(self, command):
        cart = load_cart(command.cart_id)
        lines = json.loads(command.products)
        for line in lines:
            load_product(line["product_id"])
        cart.replace_products(lines)
        current_domain.repository_for(Cart).add(cart)
        return cart.to_document()
