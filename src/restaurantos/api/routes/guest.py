from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from restaurantos.api.deps import get_menu, get_tables
from restaurantos.crud import MenuCatalog, TableStore
from restaurantos.models.table import TableStatusEnum
from restaurantos.schemas.menu import MenuItemRead
from restaurantos.schemas.table import TableRead

router = APIRouter(prefix="/guest", tags=["guest"])


class GuestLanding(BaseModel):
    table: Optional[TableRead] = None
    available_tables: List[TableRead]
    menu: List[MenuItemRead]


@router.get("", response_model=GuestLanding)
async def guest_landing(
    table: Optional[str] = Query(None, description="Table id from the QR code"),
    tables: TableStore = Depends(get_tables),
    menu: MenuCatalog = Depends(get_menu),
):
    """
    Entry point of a QR deep link. An unknown ``table`` just leaves the
    guest to pick one from the floor plan.
    """
    selected = await tables.resolve_table_param(table)
    free = [t for t in await tables.get_all_tables() if t.status == TableStatusEnum.available]
    return GuestLanding(table=selected, available_tables=free, menu=await menu.get_available_items())
