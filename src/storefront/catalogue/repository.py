"""Repository for the Product aggregate with the listing query builder."""

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_code(self, code: str) -> Product | None:
        """Find the product holding ``code``, if any."""
        results = self._dao.query.filter(code=code).all()
        return results.first

    def find_page(self, query):
        """Run a ``ProductQuery`` against the collection.

        Filters narrow the collection, ordering is applied before slicing,
        and the returned ResultSet carries the unsliced ``total``.
        """
        queryset = self._dao.query
        if query.category:
            queryset = queryset.filter(category=query.category)
        if query.available is not None:
            queryset = queryset.filter(status=query.available)
        if query.sort_by_price == "asc":
            queryset = queryset.order_by("price")
        elif query.sort_by_price == "desc":
            queryset = queryset.order_by("-price")

        return queryset.offset(query.offset).limit(query.limit).all()

    def remove_product(self, product: Product) -> None:
        self._dao.delete(product)
