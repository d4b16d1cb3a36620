"""Product removal: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import ErrorCode, StorefrontError

logger = structlog.get_logger(__name__)

PRODUCT_REMOVED = "Product removed correctly"


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class RemoveProductHandler:
    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise StorefrontError(ErrorCode.PRODUCT_NOT_FOUND, cause="Product not found in the database") from None

        repo.remove_product(product)
        logger.info("Product removed", product_id=command.product_id, code=product.code)
        return PRODUCT_REMOVED
