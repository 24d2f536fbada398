from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from restaurantos.api.deps import get_menu, get_orders, get_tables
from restaurantos.crud import MenuCatalog, OrderStore, TableStore
from restaurantos.errors import NotFound, ValidationFailed
from restaurantos.schemas.cart import CartItem
from restaurantos.schemas.order import OrderCreate, OrderRead, OrderStatusUpdate

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderRead, status_code=201)
async def place_order(
    order_in: OrderCreate,
    orders: OrderStore = Depends(get_orders),
    menu: MenuCatalog = Depends(get_menu),
    tables: TableStore = Depends(get_tables),
):
    """
    Places a guest order. Cart lines reference menu items by id; the
    current catalog row is copied into the order.
    """
    if not await tables.get_table(order_in.table_id):
        raise NotFound(f"Table {order_in.table_id} not found")

    items = []
    for line in order_in.items:
        menu_item = await menu.get_menu_item(line.menu_item_id)
        if not menu_item:
            raise NotFound(f"Menu item {line.menu_item_id} not found")
        if not menu_item.available:
            raise ValidationFailed(f"{menu_item.name} is not available")
        items.append(
            CartItem(
                menu_item=menu_item,
                quantity=line.quantity,
                special_instructions=line.special_instructions,
            )
        )

    return await orders.place_order(order_in.table_id, items, order_in.special_requests)


@router.get("/", response_model=List[OrderRead])
async def list_orders(
    table_id: Optional[str] = Query(None, description="Only orders of this table"),
    orders: OrderStore = Depends(get_orders),
):
    """
    All orders, oldest first, optionally for one table.
    """
    if table_id is not None:
        return await orders.get_orders_by_table(table_id)
    return await orders.get_all_orders()


@router.get("/kitchen", response_model=List[OrderRead])
async def list_kitchen_orders(orders: OrderStore = Depends(get_orders)):
    return await orders.get_kitchen_orders()


@router.get("/bar", response_model=List[OrderRead])
async def list_bar_orders(orders: OrderStore = Depends(get_orders)):
    return await orders.get_bar_orders()


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: int = Path(..., description="Order id"),
    orders: OrderStore = Depends(get_orders),
):
    order = await orders.get_order_status(order_id)
    if not order:
        raise NotFound("Order not found")
    return order


@router.patch("/{order_id}/status", response_model=OrderRead)
async def update_order_status(
    order_id: int,
    status_in: OrderStatusUpdate,
    orders: OrderStore = Depends(get_orders),
):
    """
    Moves the order one step along pending → confirmed → preparing →
    ready → served → paid. Skipping or going back is a 400.
    """
    if not await orders.update_order_status(order_id, status_in.status):
        raise NotFound("Order not found")
    return await orders.get_order_status(order_id)
