"""
Allowed status changes for orders and tables.

Setting the current status again is always allowed and changes nothing.
"""
from typing import Dict, FrozenSet

from restaurantos.errors import InvalidTransition, ValidationFailed
from restaurantos.models.order import OrderStatusEnum
from restaurantos.models.table import TableStatusEnum

ORDER_TRANSITIONS: Dict[OrderStatusEnum, FrozenSet[OrderStatusEnum]] = {
    OrderStatusEnum.pending: frozenset({OrderStatusEnum.confirmed}),
    OrderStatusEnum.confirmed: frozenset({OrderStatusEnum.preparing}),
    OrderStatusEnum.preparing: frozenset({OrderStatusEnum.ready}),
    OrderStatusEnum.ready: frozenset({OrderStatusEnum.served}),
    OrderStatusEnum.served: frozenset({OrderStatusEnum.paid}),
    OrderStatusEnum.paid: frozenset(),
}

TABLE_TRANSITIONS: Dict[TableStatusEnum, FrozenSet[TableStatusEnum]] = {
    TableStatusEnum.available: frozenset({
        TableStatusEnum.occupied,
        TableStatusEnum.needs_cleaning,
    }),
    TableStatusEnum.occupied: frozenset({
        TableStatusEnum.needs_service,
        TableStatusEnum.needs_cleaning,
        TableStatusEnum.available,
    }),
    TableStatusEnum.needs_service: frozenset({
        TableStatusEnum.occupied,
        TableStatusEnum.needs_cleaning,
    }),
    TableStatusEnum.needs_cleaning: frozenset({TableStatusEnum.available}),
}


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationFailed(f"Unknown status: {value}") from None


def order_status(value) -> OrderStatusEnum:
    return _coerce(OrderStatusEnum, value)


def table_status(value) -> TableStatusEnum:
    return _coerce(TableStatusEnum, value)


def check_order_transition(current, target, strict: bool = True) -> None:
    current, target = order_status(current), order_status(target)
    if strict and current != target and target not in ORDER_TRANSITIONS[current]:
        raise InvalidTransition("order", current.value, target.value)


def check_table_transition(current, target, strict: bool = True) -> None:
    current, target = table_status(current), table_status(target)
    if strict and current != target and target not in TABLE_TRANSITIONS[current]:
        raise InvalidTransition("table", current.value, target.value)
