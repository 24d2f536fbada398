from decimal import Decimal

import pytest

from restaurantos.schemas.menu import MenuItemRead
from restaurantos.services.cart import Cart


@pytest.fixture
def risotto():
    return MenuItemRead(id="1", name="Risotto", price=Decimal("28.99"), category="main", prep_time=25)


@pytest.fixture
def beer():
    return MenuItemRead(id="5", name="Beer", price=Decimal("8.99"), category="drink", prep_time=2)


def test_same_item_and_instructions_stack(risotto):
    cart = Cart()
    cart.add(risotto)
    cart.add(risotto, quantity=2)

    assert len(cart) == 1
    assert cart.items[0].quantity == 3


def test_different_instructions_get_own_line(risotto):
    cart = Cart()
    cart.add(risotto)
    cart.add(risotto, special_instructions="no cheese")

    assert len(cart) == 2
    assert cart.count == 2


def test_total_and_count(risotto, beer):
    cart = Cart()
    cart.add(risotto, 2)
    cart.add(beer)

    assert cart.total == Decimal("66.97")
    assert cart.count == 3


def test_update_quantity_and_remove(risotto, beer):
    cart = Cart()
    cart.add(risotto)
    cart.add(beer)

    cart.update_quantity(1, 4)
    assert cart.items[1].quantity == 4

    cart.update_quantity(0, 0)
    assert [i.menu_item.id for i in cart.items] == ["5"]

    cart.remove(0)
    assert len(cart) == 0
    assert cart.total == Decimal("0")


def test_items_are_copies(risotto):
    cart = Cart()
    cart.add(risotto)

    cart.items[0].quantity = 10

    assert cart.items[0].quantity == 1


def test_clear(risotto, beer):
    cart = Cart()
    cart.add(risotto)
    cart.add(beer)
    cart.clear()

    assert cart.count == 0
    assert cart.items == []


async def test_cart_feeds_place_order(restaurant):
    cart = Cart()
    cart.add(await restaurant.menu.get_menu_item("1"), 2)
    cart.add(await restaurant.menu.get_menu_item("5"))

    order = await restaurant.orders.place_order("3", cart.items)
    cart.clear()

    assert order.total == Decimal("66.97")
    assert order.estimated_time == 50
    assert cart.count == 0
