from decimal import Decimal
from typing import List, Optional

from restaurantos.schemas.cart import CartItem
from restaurantos.schemas.menu import MenuItemRead


class Cart:
    """
    Guest-side cart. Lives only in the guest session; nothing in it
    reaches the store until the order is placed.
    """

    def __init__(self):
        self._items: List[CartItem] = []

    @property
    def items(self) -> List[CartItem]:
        return [item.model_copy() for item in self._items]

    def add(self, menu_item: MenuItemRead, quantity: int = 1, special_instructions: Optional[str] = None) -> None:
        # same dish with the same instructions stacks on one line
        for index, item in enumerate(self._items):
            if item.menu_item.id == menu_item.id and item.special_instructions == special_instructions:
                self._items[index] = item.model_copy(update={"quantity": item.quantity + quantity})
                return
        self._items.append(
            CartItem(menu_item=menu_item, quantity=quantity, special_instructions=special_instructions)
        )

    def remove(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def update_quantity(self, index: int, quantity: int) -> None:
        if quantity <= 0:
            self.remove(index)
            return
        if 0 <= index < len(self._items):
            self._items[index] = self._items[index].model_copy(update={"quantity": quantity})

    def clear(self) -> None:
        self._items = []

    @property
    def total(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self._items)

    def __len__(self):
        return len(self._items)
