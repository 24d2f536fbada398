"""
Aggregates behind the staff dashboards. Pure functions over store
snapshots, the routes fetch the data.
"""
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from restaurantos.models.order import OrderStatusEnum, utcnow
from restaurantos.models.table import TableStatusEnum
from restaurantos.schemas.dashboard import AdminDashboard, StationDashboard, WaiterDashboard
from restaurantos.schemas.menu import MenuItemRead
from restaurantos.schemas.order import OrderRead
from restaurantos.schemas.table import TableRead
from restaurantos.schemas.ticket import StationEnum
from restaurantos.services.tickets import DEFAULT_URGENT_MINUTES, build_ticket

WAITER_FILTERS = ("all", "occupied", "needs-service", "ready-orders")

CENTS = Decimal("0.01")


def station_dashboard(
    station: StationEnum,
    orders: Sequence[OrderRead],
    tables: Sequence[TableRead],
    poll_interval: int,
    urgent_minutes: int = DEFAULT_URGENT_MINUTES,
    now: Optional[datetime] = None,
) -> StationDashboard:
    now = now or utcnow()
    tables_by_id = {t.id: t for t in tables}
    tickets = [
        ticket
        for ticket in (
            build_ticket(o, station, tables_by_id.get(o.table_id), now, urgent_minutes) for o in orders
        )
        if ticket is not None
    ]

    def count(status):
        return sum(1 for t in tickets if t.status == status)

    return StationDashboard(
        station=station,
        tickets=tickets,
        pending_count=count(OrderStatusEnum.pending),
        confirmed_count=count(OrderStatusEnum.confirmed),
        preparing_count=count(OrderStatusEnum.preparing),
        urgent_count=sum(1 for t in tickets if t.is_urgent),
        poll_interval=poll_interval,
    )


def waiter_dashboard(
    tables: Sequence[TableRead],
    orders: Sequence[OrderRead],
    poll_interval: int,
    filter: str = "all",
) -> WaiterDashboard:
    if filter not in WAITER_FILTERS:
        raise ValueError(f"Unknown filter: {filter}")

    ready_orders = [o for o in orders if o.status == OrderStatusEnum.ready]
    active_orders = [o for o in orders if o.is_active]
    ready_tables = {o.table_id for o in ready_orders}

    def tables_for(name: str) -> List[TableRead]:
        if name == "occupied":
            return [t for t in tables if t.status == TableStatusEnum.occupied]
        if name == "needs-service":
            return [t for t in tables if t.status == TableStatusEnum.needs_service]
        if name == "ready-orders":
            return [t for t in tables if t.id in ready_tables]
        return list(tables)

    filter_counts: Dict[str, int] = {name: len(tables_for(name)) for name in WAITER_FILTERS}
    # the "Ready Orders" tab counts orders, not tables
    filter_counts["ready-orders"] = len(ready_orders)

    return WaiterDashboard(
        filter=filter,
        tables=tables_for(filter),
        ready_orders=ready_orders,
        active_orders=active_orders,
        filter_counts=filter_counts,
        poll_interval=poll_interval,
    )


def admin_dashboard(
    orders: Sequence[OrderRead],
    tables: Sequence[TableRead],
    menu: Sequence[MenuItemRead],
    poll_interval: int,
    now: Optional[datetime] = None,
) -> AdminDashboard:
    now = now or utcnow()
    today = now.date()

    paid = [o for o in orders if o.status == OrderStatusEnum.paid]
    today_orders = [o for o in orders if o.created_at.date() == today]

    total_revenue = sum((o.total for o in paid), Decimal("0"))
    today_revenue = sum((o.total for o in paid if o.created_at.date() == today), Decimal("0"))
    average = total_revenue / len(paid) if paid else Decimal("0")

    occupied = sum(1 for t in tables if t.status == TableStatusEnum.occupied)
    occupancy = occupied / len(tables) * 100 if tables else 0.0

    return AdminDashboard(
        today_orders=len(today_orders),
        total_revenue=total_revenue.quantize(CENTS),
        today_revenue=today_revenue.quantize(CENTS),
        average_order_value=average.quantize(CENTS),
        table_count=len(tables),
        occupied_tables=occupied,
        occupancy_rate=round(occupancy, 1),
        menu_items=len(menu),
        poll_interval=poll_interval,
    )
