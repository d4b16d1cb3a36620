"""Repository lookups that translate missing documents into catalogued errors."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.errors import ErrorCode, StorefrontError
from storefront.ordering.cart import Cart


def load_cart(cart_id) -> Cart:
    try:
        return current_domain.repository_for(Cart).get(cart_id)
    except ObjectNotFoundError:
        raise StorefrontError(ErrorCode.CART_NOT_FOUND, cause=f"Cart {cart_id} not found") from None


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise StorefrontError(ErrorCode.PRODUCT_NOT_FOUND, cause=f"Product {product_id} not found") from None


def find_product(product_id) -> Product | None:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None
