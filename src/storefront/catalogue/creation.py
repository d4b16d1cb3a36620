"""Product creation: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)

PRODUCT_ADDED = "Product added successfully."
PRODUCT_DUPLICATED = "Product with that code already exist. Not added"
PRODUCT_NOT_ADDED = "Error adding product."


@storefront.command(part_of="Product")
class AddProduct:
    title: String(required=True, max_length=255)
    description: Text(required=True)
    code: String(required=True, max_length=50)
    price: Float(required=True, min_value=0.0)
    stock: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    status: Boolean(default=True)
    thumbnails: Text()  # JSON array of image URLs
    owner: String(max_length=255)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        """Returns the new product id, or None when the code is already taken."""
        repo = current_domain.repository_for(Product)
        if repo.find_by_code(command.code) is not None:
            logger.info("Product code already in catalogue", code=command.code)
            return None

        product = Product.create(
            title=command.title,
            description=command.description,
            code=command.code,
            price=command.price,
            stock=command.stock,
            category=command.category,
            status=command.status,
            thumbnails=json.loads(command.thumbnails) if command.thumbnails else None,
            owner=command.owner,
        )
        repo.add(product)
        logger.info("Product added", product_id=str(product.id), code=product.code)
        return str(product.id)
