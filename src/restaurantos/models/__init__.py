from .menu_item import MenuItem, MenuCategoryEnum
from .table import Table, TableStatusEnum
from .order import Order, OrderStatusEnum
from .order_item import OrderItem

__all__ = [
    "MenuItem",
    "MenuCategoryEnum",
    "Table",
    "TableStatusEnum",
    "Order",
    "OrderStatusEnum",
    "OrderItem",
]
