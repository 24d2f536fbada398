from typing import List

from fastapi import APIRouter, Depends

from restaurantos.api.deps import get_restaurant
from restaurantos.crud import Restaurant
from restaurantos.errors import NotFound
from restaurantos.schemas.order import OrderStatusUpdate
from restaurantos.schemas.ticket import StationEnum, TicketRead, TicketStatusResult
from restaurantos.services.tickets import build_ticket, split_tickets

router = APIRouter(prefix="/tickets", tags=["tickets"])


async def _station_orders(restaurant: Restaurant, station: StationEnum):
    if station == StationEnum.bar:
        return await restaurant.orders.get_bar_orders()
    return await restaurant.orders.get_kitchen_orders()


@router.get("/{station}", response_model=List[TicketRead])
async def list_tickets(station: StationEnum, restaurant: Restaurant = Depends(get_restaurant)):
    """
    Open tickets of a station, oldest first.
    """
    tables = {t.id: t for t in await restaurant.tables.get_all_tables()}
    urgent = restaurant.settings.URGENT_ORDER_MINUTES
    orders = await _station_orders(restaurant, station)
    return [build_ticket(o, station, tables.get(o.table_id), urgent_minutes=urgent) for o in orders]


@router.post("/{station}/{order_id}/status", response_model=TicketStatusResult)
async def update_ticket_status(
    station: StationEnum,
    order_id: int,
    status_in: OrderStatusUpdate,
    restaurant: Restaurant = Depends(get_restaurant),
):
    """
    Tickets have no status of their own: this moves the order, so the
    other station's ticket of the same order changes too. Both tickets
    are returned.
    """
    order = await restaurant.orders.get_order_status(order_id)
    if not order or build_ticket(order, station) is None:
        raise NotFound(f"No {station.value} ticket for order {order_id}")

    if not await restaurant.orders.update_order_status(order_id, status_in.status):
        raise NotFound("Order not found")

    order = await restaurant.orders.get_order_status(order_id)
    table = await restaurant.tables.get_table(order.table_id)
    kitchen, bar = split_tickets(order, table, urgent_minutes=restaurant.settings.URGENT_ORDER_MINUTES)
    return TicketStatusResult(order=order, kitchen=kitchen, bar=bar)
