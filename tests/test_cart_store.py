from __future__ import annotations

import pytest

from funfood.domain.entities.cart import Product
from funfood.domain.exceptions import ValidationError
from funfood.domain.services.stores.cart_store import CartStore

PHO = Product(id=1, name="Pho", price=45000, discount=10)
TEA = Product(id=2, name="Tea", price=5000)
RICE = Product(id=3, name="Com tam", price=35000, discount=25)


def test_repeated_adds_merge_into_one_line() -> None:
    cart = CartStore()
    for quantity in (1, 3, 2):
        cart.add_item(PHO, quantity)

    assert cart.distinct_item_count == 1
    assert cart.items[0].product_id == PHO.id
    assert cart.items[0].quantity == 6


def test_new_products_get_distinct_line_ids() -> None:
    cart = CartStore()
    first = cart.add_item(PHO)
    second = cart.add_item(TEA)

    assert first.id != second.id
    assert cart.distinct_item_count == 2
    assert cart.get_item_count() == 2


@pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
def test_add_rejects_non_positive_or_non_integer_quantity(quantity) -> None:
    cart = CartStore()
    with pytest.raises(ValidationError):
        cart.add_item(PHO, quantity)
    assert cart.is_empty


def test_empty_cart_totals_are_zero() -> None:
    cart = CartStore()
    assert cart.get_total_price() == 0
    assert cart.get_item_count() == 0


def test_total_price_applies_discount() -> None:
    cart = CartStore()
    cart.add_item(PHO, 2)  # 40500 each
    cart.add_item(TEA, 3)  # 5000 each

    assert cart.get_total_price() == pytest.approx(2 * 40500 + 3 * 5000)
    assert cart.get_item_count() == 5


def test_total_price_independent_of_add_order() -> None:
    products = [
        Product(id=i, price=price, discount=discount)
        for i, (price, discount) in enumerate([(0.1, 0), (0.2, 3.3), (12345.67, 12.5), (0.3, 0)])
    ]
    forward, backward = CartStore(), CartStore()
    for product in products:
        forward.add_item(product, 3)
    for product in reversed(products):
        backward.add_item(product, 1)
        backward.add_item(product, 2)

    assert forward.get_total_price() == backward.get_total_price()


def test_update_quantity_zero_equals_remove() -> None:
    removed, updated = CartStore(), CartStore()
    for cart in (removed, updated):
        cart.add_item(PHO, 2)
        cart.add_item(TEA, 1)

    removed.remove_item(removed.find_by_product(PHO.id).id)
    updated.update_quantity(updated.find_by_product(PHO.id).id, 0)

    assert [i.product_id for i in removed.items] == [i.product_id for i in updated.items] == [TEA.id]
    assert removed.get_total_price() == updated.get_total_price()


def test_update_quantity_sets_value() -> None:
    cart = CartStore()
    item = cart.add_item(RICE, 1)
    cart.update_quantity(item.id, 4)

    assert cart.get_item_count() == 4
    assert cart.get_total_price() == pytest.approx(4 * 26250)


def test_update_quantity_negative_raises_and_keeps_item() -> None:
    cart = CartStore()
    item = cart.add_item(PHO, 2)
    with pytest.raises(ValidationError):
        cart.update_quantity(item.id, -1)
    assert cart.items[0].quantity == 2


def test_remove_and_update_unknown_id_are_noops() -> None:
    cart = CartStore()
    cart.add_item(PHO)
    cart.remove_item("missing")
    cart.update_quantity("missing", 3)
    assert cart.get_item_count() == 1


def test_clear_cart() -> None:
    cart = CartStore()
    cart.add_item(PHO)
    cart.add_item(TEA)
    cart.clear_cart()
    assert cart.is_empty
    assert cart.get_total_price() == 0


def test_discount_outside_range_passes_through() -> None:
    cart = CartStore()
    cart.add_item(Product(id=9, price=100, discount=150))
    assert cart.get_total_price() == pytest.approx(-50)


def test_product_from_api_payload() -> None:
    product = Product.from_dict({"id": "4", "price": 20000, "discount": None,
                                 "name": "Banh mi", "restaurantId": 2})
    assert product == Product(id=4, price=20000.0, discount=0.0, name="Banh mi", restaurant_id=2)
