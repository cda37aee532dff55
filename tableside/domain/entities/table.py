"""
Table aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..exceptions import InvalidStateError
from ..value_objects import SessionId, TableId


@dataclass
class TableSession:
    """A period during which a table is occupied by diners."""
    id: SessionId
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: Optional[datetime] = None

    @classmethod
    def create(cls) -> "TableSession":
        return cls(id=SessionId.generate())

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    def end(self) -> None:
        """Close the session. Ended sessions are history and cannot reopen."""
        if not self.is_active:
            raise InvalidStateError(f"Session {self.id} has already ended.")
        self.ended_at = datetime.now(timezone.utc)


@dataclass
class Table:
    """
    Restaurant table, identified by its visible number.

    Holds at most one active session. Starting a session on an occupied
    table returns the running session, so several diners scanning the
    same QR code share it.
    """
    id: TableId
    active_session: Optional[TableSession] = None

    @classmethod
    def create(cls, table_id: TableId) -> "Table":
        return cls(id=table_id)

    @property
    def is_occupied(self) -> bool:
        return self.active_session is not None and self.active_session.is_active

    def start_session(self) -> TableSession:
        """
        Start a session, or return the one already running.

        Returns:
            The active session
        """
        if not self.is_occupied:
            self.active_session = TableSession.create()
        return self.active_session

    def end_session(self) -> TableSession:
        """
        End the active session and free the table.

        Returns:
            The session that was ended

        Raises:
            InvalidStateError: If the table has no active session
        """
        if not self.is_occupied:
            raise InvalidStateError(
                f"Table {self.id.value} does not have an active session to end."
            )

        session = self.active_session
        session.end()
        self.active_session = None
        return session
