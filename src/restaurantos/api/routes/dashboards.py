from fastapi import APIRouter, Depends, Query

from restaurantos.api.deps import get_restaurant
from restaurantos.crud import Restaurant
from restaurantos.errors import ValidationFailed
from restaurantos.schemas.dashboard import AdminDashboard, StationDashboard, WaiterDashboard
from restaurantos.schemas.ticket import StationEnum
from restaurantos.services import dashboards

router = APIRouter(prefix="/dashboards", tags=["dashboards"])


@router.get("/kitchen", response_model=StationDashboard)
async def kitchen_dashboard(restaurant: Restaurant = Depends(get_restaurant)):
    settings = restaurant.settings
    return dashboards.station_dashboard(
        StationEnum.kitchen,
        await restaurant.orders.get_kitchen_orders(),
        await restaurant.tables.get_all_tables(),
        poll_interval=settings.KITCHEN_POLL_SECONDS,
        urgent_minutes=settings.URGENT_ORDER_MINUTES,
    )


@router.get("/bar", response_model=StationDashboard)
async def bar_dashboard(restaurant: Restaurant = Depends(get_restaurant)):
    settings = restaurant.settings
    return dashboards.station_dashboard(
        StationEnum.bar,
        await restaurant.orders.get_bar_orders(),
        await restaurant.tables.get_all_tables(),
        poll_interval=settings.DASHBOARD_POLL_SECONDS,
        urgent_minutes=settings.URGENT_ORDER_MINUTES,
    )


@router.get("/waiter", response_model=WaiterDashboard)
async def waiter_dashboard(
    filter: str = Query("all", description="all | occupied | needs-service | ready-orders"),
    restaurant: Restaurant = Depends(get_restaurant),
):
    if filter not in dashboards.WAITER_FILTERS:
        raise ValidationFailed(f"Unknown filter: {filter}")
    return dashboards.waiter_dashboard(
        await restaurant.tables.get_all_tables(),
        await restaurant.orders.get_all_orders(),
        poll_interval=restaurant.settings.DASHBOARD_POLL_SECONDS,
        filter=filter,
    )


@router.get("/admin", response_model=AdminDashboard)
async def admin_dashboard(restaurant: Restaurant = Depends(get_restaurant)):
    return dashboards.admin_dashboard(
        await restaurant.orders.get_all_orders(),
        await restaurant.tables.get_all_tables(),
        await restaurant.menu.get_menu_items(),
        poll_interval=restaurant.settings.DASHBOARD_POLL_SECONDS,
    )
