from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel

from restaurantos.schemas.order import OrderRead
from restaurantos.schemas.table import TableRead
from restaurantos.schemas.ticket import StationEnum, TicketRead


class StationDashboard(BaseModel):
    station: StationEnum
    tickets: List[TicketRead]
    pending_count: int
    confirmed_count: int
    preparing_count: int
    urgent_count: int
    poll_interval: int


class WaiterDashboard(BaseModel):
    filter: str
    tables: List[TableRead]
    ready_orders: List[OrderRead]
    active_orders: List[OrderRead]
    filter_counts: Dict[str, int]
    poll_interval: int


class AdminDashboard(BaseModel):
    today_orders: int
    total_revenue: Decimal
    today_revenue: Decimal
    average_order_value: Decimal
    table_count: int
    occupied_tables: int
    occupancy_rate: float
    menu_items: int
    poll_interval: int
