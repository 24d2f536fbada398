import logging
from typing import List, Optional, Union

from sqlalchemy import select

from restaurantos.crud.base import StoreBase, validate_input
from restaurantos.errors import ValidationFailed
from restaurantos.models import MenuCategoryEnum, MenuItem
from restaurantos.schemas.menu import MenuItemRead, MenuItemUpdate
from restaurantos.services.events import MENU_ITEM_DELETED, MENU_ITEM_UPDATED

logger = logging.getLogger(__name__)


class MenuCatalog(StoreBase):
    """Read-only menu lookups plus the admin edit/delete stubs."""

    async def get_menu_items(self) -> List[MenuItemRead]:
        async with self._session() as db:
            result = await db.execute(select(MenuItem).order_by(MenuItem.position, MenuItem.id))
            return [MenuItemRead.model_validate(i) for i in result.scalars().all()]

    async def get_menu_items_by_category(self, category: Union[MenuCategoryEnum, str]) -> List[MenuItemRead]:
        try:
            category = MenuCategoryEnum(category)
        except ValueError:
            raise ValidationFailed(f"Unknown category: {category}") from None
        async with self._session() as db:
            result = await db.execute(
                select(MenuItem)
                .where(MenuItem.category == category)
                .order_by(MenuItem.position, MenuItem.id)
            )
            return [MenuItemRead.model_validate(i) for i in result.scalars().all()]

    async def get_available_items(self) -> List[MenuItemRead]:
        return [item for item in await self.get_menu_items() if item.available]

    async def get_menu_item(self, item_id: str) -> Optional[MenuItemRead]:
        async with self._session() as db:
            item = await db.get(MenuItem, item_id)
            return MenuItemRead.model_validate(item) if item else None

    async def update_menu_item(self, item_id: str, updates: Union[MenuItemUpdate, dict]) -> bool:
        """
        Admin edit. Only the in-memory row changes; orders already placed keep
        their own copy of the item.
        """
        updates = validate_input(MenuItemUpdate, updates).model_dump(exclude_unset=True)
        logger.info("Updating menu item %s: %s", item_id, updates)

        async with self._session() as db:
            item = await db.get(MenuItem, item_id)
            if not item:
                return False
            for key, value in updates.items():
                setattr(item, key, value)
            await db.commit()
            snapshot = MenuItemRead.model_validate(item)

        self.events.publish(MENU_ITEM_UPDATED, menu_item=snapshot.model_dump(mode="json"))
        return True

    async def delete_menu_item(self, item_id: str) -> bool:
        logger.info("Deleting menu item %s", item_id)
        async with self._session() as db:
            item = await db.get(MenuItem, item_id)
            if not item:
                return False
            await db.delete(item)
            await db.commit()

        self.events.publish(MENU_ITEM_DELETED, menu_item_id=item_id)
        return True
