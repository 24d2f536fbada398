from typing import List

from fastapi import APIRouter, Depends, Path, Response

from restaurantos.api.deps import get_tables
from restaurantos.crud import TableStore
from restaurantos.errors import NotFound
from restaurantos.schemas.table import TableCreate, TableQRCode, TableRead, TableStatusUpdate, TableUpdate

router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("/", response_model=List[TableRead])
async def list_tables(tables: TableStore = Depends(get_tables)):
    return await tables.get_all_tables()


@router.post("/", response_model=TableRead, status_code=201)
async def create_table(table_in: TableCreate, tables: TableStore = Depends(get_tables)):
    return await tables.create_table(table_in)


@router.get("/{table_id}", response_model=TableRead)
async def get_table(table_id: str = Path(..., description="Table id"), tables: TableStore = Depends(get_tables)):
    table = await tables.get_table(table_id)
    if not table:
        raise NotFound("Table not found")
    return table


@router.patch("/{table_id}", response_model=TableRead)
async def update_table(table_id: str, table_in: TableUpdate, tables: TableStore = Depends(get_tables)):
    if not await tables.update_table(table_id, table_in):
        raise NotFound("Table not found")
    return await tables.get_table(table_id)


@router.delete("/{table_id}", status_code=204)
async def delete_table(table_id: str, tables: TableStore = Depends(get_tables)):
    if not await tables.delete_table(table_id):
        raise NotFound("Table not found")
    return Response(status_code=204)


@router.patch("/{table_id}/status", response_model=TableRead)
async def update_table_status(table_id: str, status_in: TableStatusUpdate, tables: TableStore = Depends(get_tables)):
    """
    Waiter action. 400 when the floor workflow does not allow the change.
    """
    if not await tables.update_table_status(table_id, status_in.status):
        raise NotFound("Table not found")
    return await tables.get_table(table_id)


@router.get("/{table_id}/qr", response_model=TableQRCode)
async def get_table_qr(table_id: str, tables: TableStore = Depends(get_tables)):
    qr = await tables.qr_code_url(table_id)
    if not qr:
        raise NotFound("Table not found")
    return qr
