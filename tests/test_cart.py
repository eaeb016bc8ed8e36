"""Cart ledger tests."""

from __future__ import annotations

import logging

import pytest

from menu_order.cart import Cart
from menu_order.models import Catalog, NormalizedDish, OrderLine


@pytest.fixture
def pizza_pasta() -> Catalog:
    return Catalog(
        categories=("Main",),
        dishes=(
            NormalizedDish(dish_id="1", name="Pizza", category="Main", price=500),
            NormalizedDish(dish_id="2", name="Pasta", category="Main", price=300),
        ),
    )


def test_empty_cart_total_is_zero(pizza_pasta: Catalog) -> None:
    cart = Cart()
    assert cart.is_empty
    assert cart.total_price(pizza_pasta) == 0


def test_add_creates_then_increments() -> None:
    cart = Cart()
    assert cart.add("1") == 1
    assert cart.add("1") == 2
    assert cart.quantity("1") == 2


def test_add_then_remove_restores_prior_state() -> None:
    cart = Cart()
    cart.add("2")
    before = cart.items()
    cart.add("1")
    cart.remove("1")
    assert cart.items() == before
    assert cart.quantity("1") == 0


def test_entry_never_left_at_zero() -> None:
    cart = Cart()
    cart.add("1")
    cart.remove("1")
    assert cart.items() == []
    assert cart.quantity("1") == 0


def test_remove_absent_is_noop() -> None:
    cart = Cart()
    cart.add("2")
    assert cart.remove("1") == 0
    assert cart.items() == [("2", 1)]


def test_integer_and_string_ids_share_an_entry() -> None:
    cart = Cart()
    cart.add(1)
    cart.add("1")
    assert cart.items() == [("1", 2)]


def test_total_is_linear_in_added_price(pizza_pasta: Catalog) -> None:
    cart = Cart()
    cart.add("2")
    before = cart.total_price(pizza_pasta)
    cart.add("1")
    assert cart.total_price(pizza_pasta) == before + 500


def test_pizza_pasta_example(pizza_pasta: Catalog) -> None:
    cart = Cart()
    cart.add(1)
    cart.add(1)
    cart.add(2)
    assert cart.total_price(pizza_pasta) == 1300

    cart.remove(1)
    assert cart.total_price(pizza_pasta) == 800

    cart.remove(1)
    assert cart.items() == [("2", 1)]
    assert cart.total_price(pizza_pasta) == 300


def test_unknown_id_excluded_from_total_and_logged(pizza_pasta: Catalog, caplog: pytest.LogCaptureFixture) -> None:
    cart = Cart()
    cart.add("1")
    cart.add("99")
    with caplog.at_level(logging.ERROR, logger="menu_order.cart"):
        assert cart.total_price(pizza_pasta) == 500
    assert "'99'" in caplog.text


def test_count_and_line_total(pizza_pasta: Catalog) -> None:
    cart = Cart()
    cart.add("1")
    cart.add("1")
    cart.add("2")
    assert cart.count == 3
    assert cart.line_total(pizza_pasta, "1") == 1000


def test_order_payload_in_insertion_order() -> None:
    cart = Cart()
    cart.add("2")
    cart.add("1")
    cart.add("1")
    assert cart.to_order_lines() == [OrderLine("2", 1), OrderLine("1", 2)]
    assert cart.to_order_payload() == {
        "orders": [{"dish_id": "2", "amount": 1}, {"dish_id": "1", "amount": 2}],
    }

