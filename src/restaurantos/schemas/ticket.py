import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from restaurantos.models.order import OrderStatusEnum
from restaurantos.schemas.order import OrderItemRead, OrderRead


class StationEnum(str, enum.Enum):
    kitchen = "kitchen"
    bar = "bar"


class TicketRead(BaseModel):
    """
    Station view over part of an order.
    ``status`` is the order's own status: kitchen and bar tickets of one
    order always show the same value.
    """

    station: StationEnum
    order_id: int
    table_id: str
    table_name: Optional[str] = None
    status: OrderStatusEnum
    created_at: datetime
    special_requests: Optional[str] = None
    items: List[OrderItemRead]
    age_minutes: int
    is_urgent: bool


class TicketStatusResult(BaseModel):
    order: OrderRead
    kitchen: Optional[TicketRead] = None
    bar: Optional[TicketRead] = None
