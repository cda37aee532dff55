"""Application DTOs for table sessions."""

from datetime import datetime

from pydantic import BaseModel, Field


class TableSessionDTO(BaseModel):
    """Active session of a table."""

    session_id: str = Field(..., description="Session ID")
    table_number: int = Field(..., gt=0, description="Table number")
    started_at: datetime = Field(..., description="Session start")

    model_config = {"frozen": True}


class EndedTableSessionDTO(BaseModel):
    """Session that was just closed."""

    session_id: str = Field(..., description="Session ID")
    table_number: int = Field(..., gt=0, description="Table number")
    ended_at: datetime = Field(..., description="Session end")

    model_config = {"frozen": True}
