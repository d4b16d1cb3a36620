"""Application tests for purchasing a cart."""

from protean.utils.globals import current_domain
from storefront.catalogue.creation import AddProduct
from storefront.catalogue.details import UpdateProduct
from storefront.catalogue.product import Product
from storefront.ordering.cart import Cart
from storefront.ordering.items import AddProductToCart
from storefront.ordering.management import CreateCart
from storefront.ordering.purchase import PurchaseCart
from storefront.ordering.ticket import Ticket

PURCHASER = "ada@example.com"


def _product(code, price=10.0, stock=5):
    return current_domain.process(
        AddProduct(
            title=f"Product {code}",
            description="Purchasable product",
            code=code,
            price=price,
            stock=stock,
            category="electronics",
        ),
        asynchronous=False,
    )


def _cart_with(*lines):
    cart_id = current_domain.process(CreateCart(), asynchronous=False)
    for product_id, quantity in lines:
        current_domain.process(
            AddProductToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
    return cart_id


def _purchase(cart_id):
    return current_domain.process(PurchaseCart(cart_id=cart_id, purchaser=PURCHASER), asynchronous=False)


class TestPurchaseCart:
    def test_everything_in_stock(self):
        keyboard = _product("KB", price=10.0, stock=5)
        mouse = _product("MS", price=2.5, stock=5)
        cart_id = _cart_with((keyboard, 2), (mouse, 1))

        result = _purchase(cart_id)

        assert result["unavailable_products"] == []
        ticket = result["ticket"]
        assert ticket["amount"] == 22.5
        assert ticket["purchaser"] == PURCHASER
        assert current_domain.repository_for(Product).get(keyboard).stock == 3
        assert current_domain.repository_for(Cart).get(cart_id).items == []
        assert current_domain.repository_for(Ticket)._dao.query.all().total == 1

    def test_insufficient_stock_stays_in_cart(self):
        keyboard = _product("KB", stock=5)
        scarce = _product("SC", stock=1)
        cart_id = _cart_with((keyboard, 1), (scarce, 3))

        result = _purchase(cart_id)

        assert result["unavailable_products"] == [scarce]
        assert [line["product_id"] for line in result["ticket"]["products"]] == [keyboard]
        remaining = current_domain.repository_for(Cart).get(cart_id)
        assert [str(i.product_id) for i in remaining.items] == [scarce]
        assert current_domain.repository_for(Product).get(scarce).stock == 1

    def test_inactive_product_is_unavailable(self):
        product_id = _product("OFF")
        cart_id = _cart_with((product_id, 1))
        current_domain.process(
            UpdateProduct(product_id=product_id, changes='{"status": false}'),
            asynchronous=False,
        )

        result = _purchase(cart_id)

        assert result["ticket"] is None
        assert result["unavailable_products"] == [product_id]

    def test_nothing_purchasable_issues_no_ticket(self):
        product_id = _product("SC", stock=0)
        cart_id = _cart_with((product_id, 1))

        result = _purchase(cart_id)

        assert result == {"ticket": None, "unavailable_products": [product_id]}
        assert current_domain.repository_for(Ticket)._dao.query.all().total == 0

    def test_empty_cart(self):
        result = _purchase(_cart_with())
        assert result == {"ticket": None, "unavailable_products": []}
