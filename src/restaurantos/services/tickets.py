"""
Kitchen/bar ticket projections of an order.

Drinks go to the bar, everything else to the kitchen. A ticket with no
items is not produced at all.
"""
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from restaurantos.models.order import utcnow
from restaurantos.schemas.order import OrderItemRead, OrderRead
from restaurantos.schemas.table import TableRead
from restaurantos.schemas.ticket import StationEnum, TicketRead

DEFAULT_URGENT_MINUTES = 30


def belongs_to(item: OrderItemRead, station: StationEnum) -> bool:
    if StationEnum(station) == StationEnum.bar:
        return item.is_drink
    return not item.is_drink


def partition_items(items: Iterable[OrderItemRead]) -> Tuple[List[OrderItemRead], List[OrderItemRead]]:
    kitchen, bar = [], []
    for item in items:
        (bar if item.is_drink else kitchen).append(item)
    return kitchen, bar


def order_age_minutes(order: OrderRead, now: Optional[datetime] = None) -> int:
    now = now or utcnow()
    return max(int((now - order.created_at).total_seconds() // 60), 0)


def build_ticket(
    order: OrderRead,
    station: StationEnum,
    table: Optional[TableRead] = None,
    now: Optional[datetime] = None,
    urgent_minutes: int = DEFAULT_URGENT_MINUTES,
) -> Optional[TicketRead]:
    items = [item for item in order.items if belongs_to(item, station)]
    if not items:
        return None

    age = order_age_minutes(order, now)
    return TicketRead(
        station=station,
        order_id=order.id,
        table_id=order.table_id,
        table_name=table.name if table else None,
        status=order.status,
        created_at=order.created_at,
        special_requests=order.special_requests,
        items=items,
        age_minutes=age,
        is_urgent=age > urgent_minutes,
    )


def split_tickets(
    order: OrderRead,
    table: Optional[TableRead] = None,
    now: Optional[datetime] = None,
    urgent_minutes: int = DEFAULT_URGENT_MINUTES,
) -> Tuple[Optional[TicketRead], Optional[TicketRead]]:
    """Returns (kitchen_ticket, bar_ticket); either may be None."""
    now = now or utcnow()
    return (
        build_ticket(order, StationEnum.kitchen, table, now, urgent_minutes),
        build_ticket(order, StationEnum.bar, table, now, urgent_minutes),
    )
