"""Product updates: command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import ErrorCode, StorefrontError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    changes = Text(required=True)  # JSON object of field -> new value


@storefront.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise StorefrontError(ErrorCode.PRODUCT_NOT_FOUND, cause="Product not found in the database") from None

        changes = json.loads(command.changes)
        new_code = changes.get("code")
        if new_code is not None and new_code != product.code:
            holder = repo.find_by_code(new_code)
            if holder is not None and str(holder.id) != str(product.id):
                raise StorefrontError(ErrorCode.DUPLICATE_PRODUCT_CODE, cause=f"Code {new_code!r} is already in use")

        product.update_details(changes)
        repo.add(product)
        logger.info("Product updated", product_id=str(product.id), fields=sorted(changes))
        return product.to_document()
