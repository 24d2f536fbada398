from sqlalchemy import Column, Enum as SAEnum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..db.base import Base
from .menu_item import MenuCategoryEnum


class OrderItem(Base):
    """Copy of a cart line taken when the order is placed."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    menu_item_id = Column(String(32), nullable=False)
    name = Column(String(128), nullable=False)
    category = Column(SAEnum(MenuCategoryEnum, name="menu_category"), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # fixed at placement time
    prep_time = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    special_instructions = Column(Text, nullable=True)

    order = relationship("Order", back_populates="items")
