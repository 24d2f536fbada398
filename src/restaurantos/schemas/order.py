from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from restaurantos.models.menu_item import MenuCategoryEnum
from restaurantos.models.order import OrderStatusEnum
from restaurantos.schemas.cart import CartLineIn


class OrderItemRead(BaseModel):
    menu_item_id: str
    name: str
    category: MenuCategoryEnum
    price: Decimal
    prep_time: int
    quantity: int
    special_instructions: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_drink(self) -> bool:
        return self.category == MenuCategoryEnum.drink


class OrderRead(BaseModel):
    id: int
    table_id: str
    status: OrderStatusEnum
    created_at: datetime
    total: Decimal
    special_requests: Optional[str] = None
    estimated_time: Optional[int] = None
    items: List[OrderItemRead] = []
    count_items: int = 0

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_orm_with_items(cls, order):
        return cls(
            id=order.id,
            table_id=order.table_id,
            status=order.status,
            created_at=order.created_at,
            total=Decimal(order.total).quantize(Decimal("0.01")),
            special_requests=order.special_requests,
            estimated_time=order.estimated_time,
            items=[OrderItemRead.model_validate(i) for i in order.items],
            count_items=sum(i.quantity for i in order.items),
        )

    @property
    def is_active(self) -> bool:
        return self.status not in (OrderStatusEnum.served, OrderStatusEnum.paid)


class OrderCreate(BaseModel):
    table_id: str
    items: List[CartLineIn]
    special_requests: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatusEnum

    model_config = ConfigDict(extra="forbid")
