import asyncio
from decimal import Decimal

import pytest

from restaurantos.errors import InvalidTransition, TransientIOFailure, ValidationFailed
from restaurantos.models import OrderStatusEnum
from restaurantos.crud import Restaurant
from restaurantos.schemas.cart import CartItem
from restaurantos.schemas.menu import MenuItemUpdate

from .conftest import BEER, BURRATA, LAVA_CAKE, RISOTTO, SALMON, WINE, LockedDatabase


async def advance(restaurant, order_id, *statuses):
    for status in statuses:
        assert await restaurant.orders.update_order_status(order_id, status)


async def test_place_order_risotto_and_beer(restaurant, make_cart):
    items = await make_cart((RISOTTO, 2), (BEER, 1))

    order = await restaurant.orders.place_order("3", items)

    assert order.table_id == "3"
    assert order.total == Decimal("66.97")
    assert order.estimated_time == 50
    assert order.status == OrderStatusEnum.pending
    assert order.count_items == 3
    assert [i.name for i in order.items] == ["Truffle Mushroom Risotto", "Craft Beer Selection"]


async def test_total_is_sum_of_price_times_quantity(restaurant, make_cart):
    items = await make_cart((SALMON, 3), (BURRATA, 1), (WINE, 2))

    order = await restaurant.orders.place_order("5", items)

    expected = sum(i.menu_item.price * i.quantity for i in items)
    assert order.total == expected
    assert order.total == Decimal("139.94")


async def test_estimated_time_is_slowest_line_not_sum(restaurant, make_cart):
    # 20*1, 10*3, 15*1 -> slowest is the burrata line
    items = await make_cart((SALMON, 1), (BURRATA, 3), (LAVA_CAKE, 1))

    order = await restaurant.orders.place_order("1", items)

    assert order.estimated_time == 30


async def test_empty_order_is_rejected(restaurant):
    with pytest.raises(ValidationFailed):
        await restaurant.orders.place_order("1", [])

    assert await restaurant.orders.get_all_orders() == []


async def test_special_requests_and_instructions_are_kept(restaurant, make_cart):
    items = await make_cart((RISOTTO, 1, "no parmesan"))

    order = await restaurant.orders.place_order("2", items, special_requests="birthday")

    assert order.special_requests == "birthday"
    assert order.items[0].special_instructions == "no parmesan"


async def test_order_ids_increase(restaurant, make_cart):
    first = await restaurant.orders.place_order("1", await make_cart((BEER, 1)))
    second = await restaurant.orders.place_order("2", await make_cart((BEER, 1)))

    assert second.id > first.id


async def test_items_are_snapshots_of_the_menu(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((RISOTTO, 1)))

    await restaurant.menu.update_menu_item(RISOTTO, MenuItemUpdate(price=Decimal("99.00"), name="Renamed"))

    stored = await restaurant.orders.get_order_status(order.id)
    assert stored.items[0].price == Decimal("28.99")
    assert stored.items[0].name == "Truffle Mushroom Risotto"
    assert stored.total == Decimal("28.99")


async def test_kitchen_orders_filter_and_fifo(restaurant, make_cart):
    food = await restaurant.orders.place_order("1", await make_cart((SALMON, 1)))
    drinks_only = await restaurant.orders.place_order("2", await make_cart((BEER, 2)))
    mixed = await restaurant.orders.place_order("3", await make_cart((RISOTTO, 1), (WINE, 1)))
    done = await restaurant.orders.place_order("5", await make_cart((LAVA_CAKE, 1)))
    await advance(restaurant, done.id, "confirmed", "preparing", "ready")

    kitchen = await restaurant.orders.get_kitchen_orders()

    assert [o.id for o in kitchen] == [food.id, mixed.id]
    assert drinks_only.id not in [o.id for o in kitchen]
    assert all(o.status in ("pending", "confirmed", "preparing") for o in kitchen)
    assert [o.created_at for o in kitchen] == sorted(o.created_at for o in kitchen)


async def test_bar_orders_only_with_drinks(restaurant, make_cart):
    await restaurant.orders.place_order("1", await make_cart((SALMON, 1)))
    drinks = await restaurant.orders.place_order("2", await make_cart((BEER, 2)))
    mixed = await restaurant.orders.place_order("3", await make_cart((RISOTTO, 1), (WINE, 1)))

    bar = await restaurant.orders.get_bar_orders()

    assert [o.id for o in bar] == [drinks.id, mixed.id]


async def test_orders_by_table(restaurant, make_cart):
    a = await restaurant.orders.place_order("4", await make_cart((BEER, 1)))
    await restaurant.orders.place_order("5", await make_cart((BEER, 1)))
    b = await restaurant.orders.place_order("4", await make_cart((WINE, 1)))

    orders = await restaurant.orders.get_orders_by_table("4")

    assert [o.id for o in orders] == [a.id, b.id]
    assert await restaurant.orders.get_orders_by_table("nope") == []


async def test_update_unknown_order_returns_false(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((BEER, 1)))
    before = await restaurant.orders.get_all_orders()

    assert await restaurant.orders.update_order_status(9999, "confirmed") is False

    assert await restaurant.orders.get_all_orders() == before
    assert (await restaurant.orders.get_order_status(order.id)).status == OrderStatusEnum.pending


async def test_get_order_status_unknown_is_none(restaurant):
    assert await restaurant.orders.get_order_status(42) is None


async def test_status_update_is_idempotent(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((BEER, 1)))

    assert await restaurant.orders.update_order_status(order.id, "confirmed")
    first = await restaurant.orders.get_order_status(order.id)
    assert await restaurant.orders.update_order_status(order.id, "confirmed")
    second = await restaurant.orders.get_order_status(order.id)

    assert first == second
    assert second.status == OrderStatusEnum.confirmed


async def test_full_status_flow(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((SALMON, 1)))

    await advance(restaurant, order.id, "confirmed", "preparing", "ready", "served", "paid")

    assert (await restaurant.orders.get_order_status(order.id)).status == OrderStatusEnum.paid


@pytest.mark.parametrize("target", ["preparing", "ready", "served", "paid"])
async def test_skipping_a_step_is_rejected(restaurant, make_cart, target):
    order = await restaurant.orders.place_order("1", await make_cart((SALMON, 1)))

    with pytest.raises(InvalidTransition) as exc:
        await restaurant.orders.update_order_status(order.id, target)

    assert exc.value.current == "pending"
    assert exc.value.target == target
    assert (await restaurant.orders.get_order_status(order.id)).status == OrderStatusEnum.pending


async def test_paid_is_terminal(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((BEER, 1)))
    await advance(restaurant, order.id, "confirmed", "preparing", "ready", "served", "paid")

    with pytest.raises(InvalidTransition):
        await restaurant.orders.update_order_status(order.id, "pending")


async def test_lenient_mode_accepts_any_status(settings):
    lenient = settings.model_copy(update={"STRICT_STATUS_TRANSITIONS": False})
    restaurant = await Restaurant.create(lenient)
    try:
        menu_item = await restaurant.menu.get_menu_item(BEER)
        order = await restaurant.orders.place_order("1", [CartItem(menu_item=menu_item, quantity=1)])
        assert await restaurant.orders.update_order_status(order.id, "paid")
        assert (await restaurant.orders.get_order_status(order.id)).status == OrderStatusEnum.paid
    finally:
        await restaurant.close()


async def test_unknown_order_status_value(restaurant, make_cart):
    order = await restaurant.orders.place_order("1", await make_cart((BEER, 1)))

    with pytest.raises(ValidationFailed, match="Unknown status: on-fire"):
        await restaurant.orders.update_order_status(order.id, "on-fire")

    assert (await restaurant.orders.get_order_status(order.id)).status == OrderStatusEnum.pending


async def test_concurrent_orders_get_unique_ids(restaurant, make_cart):
    carts = [await make_cart((BEER, 1), (RISOTTO, n % 3 + 1)) for n in range(30)]

    placed = await asyncio.gather(
        *(restaurant.orders.place_order(str(n % 8 + 1), cart) for n, cart in enumerate(carts))
    )

    ids = [o.id for o in placed]
    assert len(set(ids)) == 30
    stored = await restaurant.orders.get_all_orders()
    assert sorted(o.id for o in stored) == sorted(ids)
    assert all(len(o.items) == 2 for o in stored)


async def test_concurrent_status_updates_stay_consistent(restaurant, make_cart):
    orders = [await restaurant.orders.place_order("1", await make_cart((SALMON, 1))) for _ in range(10)]

    results = await asyncio.gather(
        *(restaurant.orders.update_order_status(o.id, "confirmed") for o in orders),
        *(restaurant.orders.get_kitchen_orders() for _ in range(5)),
    )

    assert results[:10] == [True] * 10
    for kitchen in results[10:]:
        assert len(kitchen) == 10
    statuses = {(await restaurant.orders.get_order_status(o.id)).status for o in orders}
    assert statuses == {OrderStatusEnum.confirmed}


async def test_database_errors_are_transient(restaurant, monkeypatch):
    monkeypatch.setattr(restaurant, "sessionmaker", LockedDatabase())

    with pytest.raises(TransientIOFailure) as exc:
        await restaurant.orders.get_all_orders()

    assert exc.value.retry_after == 1
    assert not restaurant.lock.locked()
