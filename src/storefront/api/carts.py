"""FastAPI endpoints for carts and purchases."""

import json

from fastapi import APIRouter, Body, Depends
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user
from storefront.api.schemas import AddToCartRequest, CartIdResponse, CartLine, CartQuantityRequest
from storefront.errors import ErrorCode
from storefront.ordering.items import (
    AddProductToCart,
    RemoveProductFromCart,
    ReplaceCartProducts,
    UpdateCartProductQuantity,
)
from storefront.ordering.management import CreateCart, EmptyCart
from storefront.ordering.purchase import PurchaseCart
from storefront.ordering.summary import populated_cart
from storefront.realtime import broadcast_products
from storefront.utils.identifiers import ensure_identifier

cart_router = APIRouter(prefix="/api/carts", tags=["carts"])


def _ids(cart_id: str, product_id: str | None = None) -> None:
    ensure_identifier(cart_id, ErrorCode.INVALID_CART_ID)
    if product_id is not None:
        ensure_identifier(product_id, ErrorCode.INVALID_PRODUCT_ID)


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart() -> CartIdResponse:
    cart_id = current_domain.process(CreateCart(), asynchronous=False)
    return CartIdResponse(cart_id=cart_id)


@cart_router.get("/{cart_id}")
async def get_cart(cart_id: str) -> dict:
    _ids(cart_id)
    return populated_cart(cart_id)


@cart_router.post("/{cart_id}/product/{product_id}")
async def add_product_to_cart(cart_id: str, product_id: str, body: AddToCartRequest | None = None) -> dict:
    _ids(cart_id, product_id)
    command = AddProductToCart(
        cart_id=cart_id,
        product_id=product_id,
        quantity=body.quantity if body else 1,
    )
    return current_domain.process(command, asynchronous=False)


@cart_router.put("/{cart_id}/products/{product_id}")
async def update_product_quantity(cart_id: str, product_id: str, body: CartQuantityRequest) -> dict:
    _ids(cart_id, product_id)
    command = UpdateCartProductQuantity(cart_id=cart_id, product_id=product_id, quantity=body.quantity)
    return current_domain.process(command, asynchronous=False)


@cart_router.delete("/{cart_id}/products/{product_id}")
async def remove_product_from_cart(cart_id: str, product_id: str) -> dict:
    _ids(cart_id, product_id)
    command = RemoveProductFromCart(cart_id=cart_id, product_id=product_id)
    return current_domain.process(command, asynchronous=False)


@cart_router.put("/{cart_id}")
async def replace_cart_products(cart_id: str, lines: list[CartLine] = Body(...)) -> dict:
    _ids(cart_id)
    for line in lines:
        ensure_identifier(line.product_id, ErrorCode.INVALID_PRODUCT_ID)
    command = ReplaceCartProducts(
        cart_id=cart_id,
        products=json.dumps([line.model_dump() for line in lines]),
    )
    return current_domain.process(command, asynchronous=False)


@cart_router.delete("/{cart_id}")
async def empty_cart(cart_id: str) -> dict:
    _ids(cart_id)
    return current_domain.process(EmptyCart(cart_id=cart_id), asynchronous=False)


@cart_router.post("/{cart_id}/purchase")
async def purchase_cart(cart_id: str, user: dict = Depends(current_user)) -> dict:
    _ids(cart_id)
    result = current_domain.process(
        PurchaseCart(cart_id=cart_id, purchaser=user["email"]),
        asynchronous=False,
    )
    if result["ticket"] is not None:
        await broadcast_products()
    return result
