"""FastAPI endpoints for the product catalogue."""

import json

import pydantic
import structlog
from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from storefront.api.dependencies import require_product_admin
from storefront.api.errors import describe_pydantic_errors
from storefront.api.schemas import MessageResponse, MessagesResponse, ProductCreateRequest, ProductUpdateRequest
from storefront.catalogue.creation import PRODUCT_ADDED, PRODUCT_DUPLICATED, PRODUCT_NOT_ADDED, AddProduct
from storefront.catalogue.details import UpdateProduct
from storefront.catalogue.listing import ProductQuery, list_products
from storefront.catalogue.removal import RemoveProduct
from storefront.errors import ErrorCode, StorefrontError
from storefront.ordering.lookup import load_product
from storefront.realtime import broadcast_products
from storefront.utils.identifiers import ensure_identifier

logger = structlog.get_logger(__name__)

PRODUCT_UPDATED = "Product updated successfully."

product_router = APIRouter(prefix="/api/products", tags=["products"])


def _validated_products(body) -> list[ProductCreateRequest]:
    """Validate a single product or a list of them; any invalid entry rejects the whole request."""
    entries = body if isinstance(body, list) else [body]
    if not entries:
        raise StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause="No products supplied")
    validated = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause=f"Entry {index} is not an object")
        try:
            validated.append(ProductCreateRequest.model_validate(entry))
        except pydantic.ValidationError as exc:
            raise StorefrontError(
                ErrorCode.INVALID_PRODUCT_DATA,
                cause=describe_pydantic_errors(exc.errors(include_url=False)),
            ) from None
    return validated


def _add_one(product: ProductCreateRequest) -> str:
    command = AddProduct(
        title=product.title,
        description=product.description,
        code=product.code,
        price=product.price,
        stock=product.stock,
        category=product.category,
        status=product.status,
        thumbnails=json.dumps(product.thumbnails),
        owner=product.owner,
    )
    try:
        product_id = current_domain.process(command, asynchronous=False)
    except Exception:
        logger.exception("Product could not be added", code=product.code)
        return PRODUCT_NOT_ADDED
    return PRODUCT_ADDED if product_id else PRODUCT_DUPLICATED


@product_router.get("")
async def get_products(request: Request) -> dict:
    query = ProductQuery.from_params(request.query_params)
    return list_products(query).to_response()


@product_router.get("/{product_id}")
async def get_product(product_id: str) -> dict:
    ensure_identifier(product_id, ErrorCode.INVALID_PRODUCT_ID)
    return load_product(product_id).to_document()


@product_router.post("", status_code=201, response_model=MessagesResponse)
async def add_products(body=Body(...), _admin=Depends(require_product_admin)):
    products = _validated_products(body)
    messages = [_add_one(product) for product in products]

    if PRODUCT_ADDED in messages:
        await broadcast_products()
        status_code = 201
    elif all(message == PRODUCT_DUPLICATED for message in messages):
        status_code = 400
    else:
        status_code = 500
    return JSONResponse(status_code=status_code, content={"messages": messages})


@product_router.put("/{product_id}")
async def update_product(product_id: str, body=Body(...), _admin=Depends(require_product_admin)) -> dict:
    ensure_identifier(product_id, ErrorCode.INVALID_PRODUCT_ID)
    if not isinstance(body, dict):
        raise StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause="Expected an object of fields to update")
    if "id" in body or "_id" in body:
        raise StorefrontError(ErrorCode.INVALID_PRODUCT_DATA, cause="The product id cannot be updated")
    try:
        changes = ProductUpdateRequest.model_validate(body).model_dump(exclude_unset=True)
    except pydantic.ValidationError as exc:
        raise StorefrontError(
            ErrorCode.INVALID_PRODUCT_DATA,
            cause=describe_pydantic_errors(exc.errors(include_url=False)),
        ) from None

    document = current_domain.process(
        UpdateProduct(product_id=product_id, changes=json.dumps(changes)),
        asynchronous=False,
    )
    await broadcast_products()
    return {"status": 200, "message": PRODUCT_UPDATED, "product": document}


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, _admin=Depends(require_product_admin)) -> MessageResponse:
    ensure_identifier(product_id, ErrorCode.INVALID_PRODUCT_ID)
    message = current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    await broadcast_products()
    return MessageResponse(message=message)
