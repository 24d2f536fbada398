from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from restaurantos.api.deps import get_menu
from restaurantos.crud import MenuCatalog
from restaurantos.errors import NotFound
from restaurantos.models.menu_item import MenuCategoryEnum
from restaurantos.schemas.menu import MenuItemRead, MenuItemUpdate

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("/", response_model=List[MenuItemRead])
async def list_menu_items(
    category: Optional[MenuCategoryEnum] = Query(None, description="Filter by category"),
    available_only: bool = Query(False, description="Hide items that are off the menu"),
    menu: MenuCatalog = Depends(get_menu),
):
    if category:
        items = await menu.get_menu_items_by_category(category)
    else:
        items = await menu.get_menu_items()
    if available_only:
        items = [i for i in items if i.available]
    return items


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item(item_id: str = Path(..., description="Menu item id"), menu: MenuCatalog = Depends(get_menu)):
    item = await menu.get_menu_item(item_id)
    if not item:
        raise NotFound("Menu item not found")
    return item


@router.patch("/{item_id}", response_model=MenuItemRead)
async def update_menu_item(item_id: str, item_in: MenuItemUpdate, menu: MenuCatalog = Depends(get_menu)):
    """
    Admin edit. Placed orders keep the values they were placed with.
    """
    if not await menu.update_menu_item(item_id, item_in):
        raise NotFound("Menu item not found")
    return await menu.get_menu_item(item_id)


@router.delete("/{item_id}", status_code=204)
async def delete_menu_item(item_id: str, menu: MenuCatalog = Depends(get_menu)):
    if not await menu.delete_menu_item(item_id):
        raise NotFound("Menu item not found")
    return Response(status_code=204)
