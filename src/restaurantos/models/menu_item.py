import enum

from sqlalchemy import JSON, Boolean, Column, Enum as SAEnum, Integer, Numeric, String, Text

from ..db.base import Base


class MenuCategoryEnum(str, enum.Enum):
    appetizer = "appetizer"
    main = "main"
    dessert = "dessert"
    drink = "drink"
    special = "special"


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String(32), primary_key=True)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(SAEnum(MenuCategoryEnum, name="menu_category"), nullable=False)
    image = Column(String(512), nullable=False, default="")
    ingredients = Column(JSON, nullable=False, default=list)
    allergens = Column(JSON, nullable=False, default=list)
    available = Column(Boolean, nullable=False, default=True)
    prep_time = Column(Integer, nullable=False, default=0)  # minutes
    position = Column(Integer, nullable=False, default=0)
