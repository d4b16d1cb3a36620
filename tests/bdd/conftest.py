"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers
from storefront.catalogue.creation import AddProduct
from storefront.catalogue.product import Product


def _add_product(code, price=10.0, stock=5):
    return current_domain.process(
        AddProduct(
            title=f"Product {code}",
            description="Scenario product",
            code=code,
            price=price,
            stock=stock,
            category="scenario",
        ),
        asynchronous=False,
    )


def _product_by_code(code) -> Product:
    return current_domain.repository_for(Product).find_by_code(code)


@pytest.fixture()
def add_product():
    return _add_product


@pytest.fixture()
def product_by_code():
    return _product_by_code


@pytest.fixture()
def outcome():
    """Container for results captured by When steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty catalogue")
def empty_catalogue():
    assert current_domain.repository_for(Product)._dao.query.all().total == 0


@given(parsers.cfparse('a catalogue with product "{code}" priced {price:f} with {stock:d} in stock'))
def catalogue_with_product(code, price, stock):
    _add_product(code, price=price, stock=stock)


@given(parsers.cfparse("a catalogue with {count:d} products"))
def catalogue_with_products(count):
    for index in range(count):
        _add_product(f"P-{index}")
