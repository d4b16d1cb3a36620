"""BDD tests for purchasing a cart."""

from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.ordering.cart import Cart
from storefront.ordering.items import AddProductToCart
from storefront.ordering.management import CreateCart
from storefront.ordering.purchase import PurchaseCart

scenarios("features/cart_purchase.feature")


def _add_to_cart(cart_id, product_id, quantity):
    current_domain.process(
        AddProductToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a cart holding {quantity:d} of "{code}"'), target_fixture="cart_id")
def cart_holding(quantity, code, product_by_code):
    cart_id = current_domain.process(CreateCart(), asynchronous=False)
    _add_to_cart(cart_id, str(product_by_code(code).id), quantity)
    return cart_id


@given(parsers.cfparse('the cart also holds {quantity:d} of "{code}"'))
def cart_also_holds(cart_id, quantity, code, product_by_code):
    _add_to_cart(cart_id, str(product_by_code(code).id), quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the cart is purchased by "{email}"'))
def cart_is_purchased(cart_id, email, outcome):
    outcome["purchase"] = current_domain.process(
        PurchaseCart(cart_id=cart_id, purchaser=email),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('a ticket for {amount:f} is issued to "{email}"'))
def ticket_issued(amount, email, outcome):
    ticket = outcome["purchase"]["ticket"]
    assert ticket["amount"] == amount
    assert ticket["purchaser"] == email


@then("no ticket is issued")
def no_ticket(outcome):
    assert outcome["purchase"]["ticket"] is None


@then(parsers.cfparse('"{code}" has {stock:d} in stock'))
def product_stock(code, stock, product_by_code):
    assert product_by_code(code).stock == stock


@then(parsers.cfparse('"{code}" is reported as unavailable'))
def reported_unavailable(code, outcome, product_by_code):
    assert str(product_by_code(code).id) in outcome["purchase"]["unavailable_products"]


@then("the cart is empty")
def cart_is_empty(cart_id):
    assert current_domain.repository_for(Cart).get(cart_id).items == []


@then(parsers.cfparse('the cart still holds "{code}"'))
def cart_still_holds(cart_id, code, product_by_code):
    items = current_domain.repository_for(Cart).get(cart_id).items
    assert [str(i.product_id) for i in items] == [str(product_by_code(code).id)]
