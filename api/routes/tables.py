"""
Table session endpoints.

The QR code on each table points the diner's browser at
POST /api/v1/tables/{table_number}/session.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from api.dependencies import (
    get_end_table_session_use_case,
    get_start_table_session_use_case,
    get_table_repository,
)
from api.responses import unwrap
from tableside.application.dtos import EndedTableSessionDTO, TableSessionDTO
from tableside.application.use_cases import EndTableSessionUseCase, StartTableSessionUseCase
from tableside.domain.repositories import TableRepository


router = APIRouter()


@router.get("", summary="List tables")
async def list_tables(repository: TableRepository = Depends(get_table_repository)) -> List[dict]:
    """List every table with its occupancy."""
    tables = await repository.get_all()
    return [
        {
            "table_number": table.id.value,
            "is_occupied": table.is_occupied,
            "session_id": str(table.active_session.id) if table.is_occupied else None,
        }
        for table in tables
    ]


@router.post(
    "/{table_number}/session",
    response_model=TableSessionDTO,
    status_code=status.HTTP_200_OK,
    summary="Start (or join) the session of a table",
)
async def start_session(
    table_number: int,
    use_case: StartTableSessionUseCase = Depends(get_start_table_session_use_case),
):
    """
    Start the session of a table.

    Scanning the QR code of an occupied table returns the running session.
    """
    return unwrap(await use_case.execute(table_number))


@router.delete(
    "/{table_number}/session",
    response_model=EndedTableSessionDTO,
    summary="End the session of a table",
)
async def end_session(
    table_number: int,
    use_case: EndTableSessionUseCase = Depends(get_end_table_session_use_case),
):
    return unwrap(await use_case.execute(table_number))
