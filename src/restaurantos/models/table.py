import enum

from sqlalchemy import Column, Enum as SAEnum, Integer, String

from ..db.base import Base


class TableStatusEnum(str, enum.Enum):
    available = "available"
    occupied = "occupied"
    needs_service = "needs-service"
    needs_cleaning = "needs-cleaning"


class Table(Base):
    __tablename__ = "dining_tables"

    id = Column(String(32), primary_key=True)
    number = Column(Integer, nullable=False)
    name = Column(String(128), nullable=False)
    seat_count = Column(Integer, nullable=False)
    status = Column(
        SAEnum(
            TableStatusEnum,
            name="table_status",
            values_callable=lambda enum_cls: [m.value for m in enum_cls],
        ),
        nullable=False,
        default=TableStatusEnum.available,
    )
