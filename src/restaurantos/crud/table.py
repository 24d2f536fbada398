import logging
from typing import List, Optional, Union
from urllib.parse import quote, urlencode

from sqlalchemy import select

from restaurantos.crud.base import StoreBase, validate_input
from restaurantos.models import Table, TableStatusEnum
from restaurantos.schemas.table import TableCreate, TableQRCode, TableRead, TableUpdate
from restaurantos.services.events import TABLE_CREATED, TABLE_DELETED, TABLE_STATUS_CHANGED, TABLE_UPDATED
from restaurantos.services.transitions import check_table_transition, table_status

logger = logging.getLogger(__name__)


class TableStore(StoreBase):

    def __init__(self, restaurant):
        super().__init__(restaurant)
        self._last_table_id = 0

    async def get_all_tables(self) -> List[TableRead]:
        async with self._session() as db:
            result = await db.execute(select(Table).order_by(Table.number, Table.id))
            return [TableRead.model_validate(t) for t in result.scalars().all()]

    async def get_table(self, table_id: str) -> Optional[TableRead]:
        async with self._session() as db:
            table = await db.get(Table, table_id)
            return TableRead.model_validate(table) if table else None

    async def resolve_table_param(self, value: Optional[str]) -> Optional[TableRead]:
        """
        ``?table=<id>`` from a QR deep link. The value is opaque and has to
        match a table id exactly.
        """
        if not value:
            return None
        return await self.get_table(value)

    async def update_table_status(self, table_id: str, status: Union[TableStatusEnum, str]) -> bool:
        """
        Returns False if the table does not exist.
        Raises InvalidTransition for a status change the floor workflow does not allow.
        """
        status = table_status(status)
        async with self._session() as db:
            table = await db.get(Table, table_id)
            if not table:
                return False

            previous = TableStatusEnum(table.status)
            check_table_transition(previous, status, strict=self.settings.STRICT_STATUS_TRANSITIONS)
            if previous == status:
                return True

            table.status = status
            await db.commit()
            snapshot = TableRead.model_validate(table)

        logger.info("Table %s status updated: %s -> %s", table_id, previous.value, status.value)
        self.events.publish(
            TABLE_STATUS_CHANGED,
            table=snapshot.model_dump(mode="json"),
            previous_status=previous.value,
        )
        return True

    async def create_table(self, table_in: Union[TableCreate, dict]) -> TableRead:
        table_in = validate_input(TableCreate, table_in)

        async with self._session() as db:
            ids = (await db.execute(select(Table.id))).scalars().all()
            numeric = [int(i) for i in ids if i.isdigit()]
            # ids of deleted tables are never handed out again: orders keep pointing at them
            self._last_table_id = max(numeric + [self._last_table_id]) + 1
            table = Table(id=str(self._last_table_id), **table_in.model_dump())
            db.add(table)
            await db.commit()
            snapshot = TableRead.model_validate(table)

        logger.info("Table %s created: %s", snapshot.id, snapshot.name)
        self.events.publish(TABLE_CREATED, table=snapshot.model_dump(mode="json"))
        return snapshot

    async def update_table(self, table_id: str, updates: Union[TableUpdate, dict]) -> bool:
        update_data = validate_input(TableUpdate, updates).model_dump(exclude_unset=True)

        async with self._session() as db:
            table = await db.get(Table, table_id)
            if not table:
                return False
            for key, value in update_data.items():
                setattr(table, key, value)
            await db.commit()
            snapshot = TableRead.model_validate(table)

        self.events.publish(TABLE_UPDATED, table=snapshot.model_dump(mode="json"))
        return True

    async def delete_table(self, table_id: str) -> bool:
        async with self._session() as db:
            table = await db.get(Table, table_id)
            if not table:
                return False
            await db.delete(table)
            await db.commit()

        logger.info("Table %s deleted", table_id)
        self.events.publish(TABLE_DELETED, table_id=table_id)
        return True

    def guest_link(self, table_id: str) -> str:
        base_url = self.settings.PUBLIC_BASE_URL.rstrip("/")
        return f"{base_url}/guest?{urlencode({'table': table_id})}"

    async def qr_code_url(self, table_id: str) -> Optional[TableQRCode]:
        if not await self.get_table(table_id):
            return None
        link = self.guest_link(table_id)
        return TableQRCode(
            table_id=table_id,
            link=link,
            qr_code_url=f"{self.settings.QR_SERVICE_URL}?size=200x200&data={quote(link, safe='')}",
        )
