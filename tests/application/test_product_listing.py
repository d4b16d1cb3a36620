"""Application tests for the product listing query builder."""

from protean.utils.globals import current_domain
from storefront.catalogue.creation import AddProduct
from storefront.catalogue.listing import ProductQuery, list_products


def _seed():
    catalogue = [
        ("B-1", "books", 12.0, True),
        ("B-2", "books", 5.0, False),
        ("B-3", "books", 30.0, True),
        ("E-1", "electronics", 200.0, True),
        ("E-2", "electronics", 99.0, True),
    ]
    for code, category, price, status in catalogue:
        current_domain.process(
            AddProduct(
                title=f"Product {code}",
                description="Listed product",
                code=code,
                price=price,
                stock=5,
                category=category,
                status=status,
            ),
            asynchronous=False,
        )


class TestListProducts:
    def test_default_page(self):
        _seed()
        page = list_products()
        assert page.total == 5
        assert len(page.products) == 5
        assert page.total_pages == 1

    def test_pagination(self):
        _seed()
        first = list_products(ProductQuery(page=1, limit=2))
        third = list_products(ProductQuery(page=3, limit=2))

        assert len(first.products) == 2
        assert first.total == 5
        assert first.total_pages == 3
        assert len(third.products) == 1
        assert third.has_next_page is False

    def test_page_past_the_end_is_empty(self):
        _seed()
        page = list_products(ProductQuery(page=9, limit=2))
        assert page.products == []
        assert page.total == 5

    def test_category_filter(self):
        _seed()
        page = list_products(ProductQuery(category="electronics"))
        assert {p["code"] for p in page.products} == {"E-1", "E-2"}

    def test_availability_filter(self):
        _seed()
        available = list_products(ProductQuery(available=True))
        unavailable = list_products(ProductQuery(available=False))
        assert available.total == 4
        assert [p["code"] for p in unavailable.products] == ["B-2"]

    def test_sort_by_price(self):
        _seed()
        ascending = list_products(ProductQuery(sort_by_price="asc"))
        descending = list_products(ProductQuery(sort_by_price="desc"))
        assert [p["price"] for p in ascending.products] == [5.0, 12.0, 30.0, 99.0, 200.0]
        assert [p["price"] for p in descending.products] == [200.0, 99.0, 30.0, 12.0, 5.0]

    def test_filters_combine_before_paging(self):
        _seed()
        page = list_products(ProductQuery(page=1, limit=1, category="books", available=True, sort_by_price="desc"))
        assert [p["code"] for p in page.products] == ["B-3"]
        assert page.total == 2
        assert page.has_next_page is True
