from typing import Optional

from pydantic import BaseModel, conint

from restaurantos.schemas.menu import MenuItemRead


class CartItem(BaseModel):
    menu_item: MenuItemRead
    quantity: conint(ge=1) = 1
    special_instructions: Optional[str] = None

    @property
    def line_total(self):
        return self.menu_item.price * self.quantity


class CartLineIn(BaseModel):
    """Cart line as a client sends it: the menu item by id."""

    menu_item_id: str
    quantity: conint(ge=1) = 1
    special_instructions: Optional[str] = None
