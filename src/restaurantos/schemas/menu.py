from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, conint, condecimal

from restaurantos.models.menu_item import MenuCategoryEnum
from restaurantos.schemas.base import PartialUpdate


class MenuItemRead(BaseModel):
    id: str
    name: str
    description: str = ""
    price: Decimal
    category: MenuCategoryEnum
    image: str = ""
    ingredients: List[str] = []
    allergens: List[str] = []
    available: bool = True
    prep_time: int = 0

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_drink(self) -> bool:
        return self.category == MenuCategoryEnum.drink


class MenuItemUpdate(PartialUpdate):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[condecimal(ge=0, max_digits=10, decimal_places=2)] = None
    category: Optional[MenuCategoryEnum] = None
    image: Optional[str] = None
    ingredients: Optional[List[str]] = None
    allergens: Optional[List[str]] = None
    available: Optional[bool] = None
    prep_time: Optional[conint(ge=0)] = None
