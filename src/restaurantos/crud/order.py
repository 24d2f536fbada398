import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Union

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from restaurantos.crud.base import StoreBase
from restaurantos.errors import ValidationFailed
from restaurantos.models import Order, OrderItem, OrderStatusEnum
from restaurantos.schemas.cart import CartItem
from restaurantos.schemas.order import OrderRead
from restaurantos.services.events import ORDER_PLACED, ORDER_STATUS_CHANGED
from restaurantos.services.transitions import check_order_transition, order_status

logger = logging.getLogger(__name__)

# statuses a station still has work for
OPEN_TICKET_STATUSES = (
    OrderStatusEnum.pending,
    OrderStatusEnum.confirmed,
    OrderStatusEnum.preparing,
)


def order_total(items: Sequence[CartItem]) -> Decimal:
    total = sum((Decimal(i.menu_item.price) * i.quantity for i in items), Decimal("0"))
    return total.quantize(Decimal("0.01"))


def estimated_time(items: Sequence[CartItem]) -> int:
    """
    The slowest line decides: max of prep_time * quantity, not the sum.
    """
    return max(i.menu_item.prep_time * i.quantity for i in items)


class OrderStore(StoreBase):
    """
    Holds every order of the process. Items are frozen at placement,
    afterwards only the status moves.
    """

    def _select(self):
        return select(Order).options(selectinload(Order.items)).order_by(Order.created_at, Order.id)

    async def place_order(
        self,
        table_id: str,
        items: Sequence[CartItem],
        special_requests: Optional[str] = None,
    ) -> OrderRead:
        if not items:
            raise ValidationFailed("Order must contain at least one item")
        for item in items:
            if item.quantity < 1:
                raise ValidationFailed(f"Invalid quantity {item.quantity} for {item.menu_item.name}")

        async with self._session() as db:
            order = Order(
                table_id=table_id,
                status=OrderStatusEnum.pending,
                total=order_total(items),
                special_requests=special_requests,
                estimated_time=estimated_time(items),
            )
            for position, item in enumerate(items):
                order.items.append(
                    OrderItem(
                        position=position,
                        menu_item_id=item.menu_item.id,
                        name=item.menu_item.name,
                        category=item.menu_item.category,
                        price=item.menu_item.price,
                        prep_time=item.menu_item.prep_time,
                        quantity=item.quantity,
                        special_instructions=item.special_instructions,
                    )
                )
            db.add(order)
            await db.commit()

            # reload with items, no lazy loads outside the session
            result = await db.execute(self._select().where(Order.id == order.id))
            placed = OrderRead.from_orm_with_items(result.scalars().unique().one())

        logger.info(
            "Order %s placed for table %s: %d items, total %s, ~%s min",
            placed.id, placed.table_id, placed.count_items, placed.total, placed.estimated_time,
        )
        self.events.publish(ORDER_PLACED, order=placed.model_dump(mode="json"))
        return placed

    async def get_all_orders(self) -> List[OrderRead]:
        async with self._session() as db:
            result = await db.execute(self._select())
            return [OrderRead.from_orm_with_items(o) for o in result.scalars().unique().all()]

    async def get_orders_by_table(self, table_id: str) -> List[OrderRead]:
        async with self._session() as db:
            result = await db.execute(self._select().where(Order.table_id == table_id))
            return [OrderRead.from_orm_with_items(o) for o in result.scalars().unique().all()]

    async def get_order_status(self, order_id: int) -> Optional[OrderRead]:
        async with self._session() as db:
            result = await db.execute(self._select().where(Order.id == order_id))
            order = result.scalars().unique().first()
            return OrderRead.from_orm_with_items(order) if order else None

    async def _open_orders(self) -> List[OrderRead]:
        async with self._session() as db:
            result = await db.execute(self._select().where(Order.status.in_(OPEN_TICKET_STATUSES)))
            return [OrderRead.from_orm_with_items(o) for o in result.scalars().unique().all()]

    async def get_kitchen_orders(self) -> List[OrderRead]:
        """Open orders with at least one non-drink item, oldest first."""
        return [o for o in await self._open_orders() if any(not i.is_drink for i in o.items)]

    async def get_bar_orders(self) -> List[OrderRead]:
        """Open orders with at least one drink, oldest first."""
        return [o for o in await self._open_orders() if any(i.is_drink for i in o.items)]

    async def update_order_status(self, order_id: int, status: Union[OrderStatusEnum, str]) -> bool:
        """
        Returns False if the order does not exist.
        Raises InvalidTransition when the status is not the next step of the flow.
        """
        status = order_status(status)
        async with self._session() as db:
            result = await db.execute(self._select().where(Order.id == order_id))
            order = result.scalars().unique().first()
            if not order:
                return False

            previous = OrderStatusEnum(order.status)
            check_order_transition(previous, status, strict=self.settings.STRICT_STATUS_TRANSITIONS)
            if previous == status:
                return True

            order.status = status
            await db.commit()
            snapshot = OrderRead.from_orm_with_items(order)

        logger.info("Order %s status updated: %s -> %s", order_id, previous.value, status.value)
        self.events.publish(
            ORDER_STATUS_CHANGED,
            order=snapshot.model_dump(mode="json"),
            previous_status=previous.value,
        )
        return True
