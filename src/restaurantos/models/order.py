import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum as SAEnum, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..db.base import Base


def utcnow() -> datetime:
    # SQLite drops tzinfo, so timestamps are kept as naive UTC everywhere
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OrderStatusEnum(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    preparing = "preparing"
    ready = "ready"
    served = "served"
    paid = "paid"


class Order(Base):
    __tablename__ = "orders"
    # never reuse ids
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    # lookup key into dining_tables, not a foreign key: tables can be deleted
    table_id = Column(String(32), nullable=False, index=True)
    status = Column(SAEnum(OrderStatusEnum, name="order_status"), nullable=False, default=OrderStatusEnum.pending)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    total = Column(Numeric(10, 2), nullable=False)
    special_requests = Column(Text, nullable=True)
    estimated_time = Column(Integer, nullable=True)  # minutes

    # snapshots, in cart order
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )
