from typing import Optional

from pydantic import BaseModel, ConfigDict, conint

from restaurantos.models.table import TableStatusEnum
from restaurantos.schemas.base import PartialUpdate


class TableRead(BaseModel):
    id: str
    number: int
    name: str
    seat_count: int
    status: TableStatusEnum

    model_config = ConfigDict(from_attributes=True)


class TableCreate(BaseModel):
    number: conint(ge=1)
    name: str
    seat_count: conint(ge=1)
    status: TableStatusEnum = TableStatusEnum.available


class TableUpdate(PartialUpdate):
    # status changes go through the status endpoint so they are validated
    number: Optional[conint(ge=1)] = None
    name: Optional[str] = None
    seat_count: Optional[conint(ge=1)] = None


class TableStatusUpdate(BaseModel):
    status: TableStatusEnum


class TableQRCode(BaseModel):
    table_id: str
    link: str
    qr_code_url: str
