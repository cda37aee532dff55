"""SQLAlchemy ORM model for Table aggregate."""

from sqlalchemy import Column, DateTime, Integer, String

from .base import Base


class TableModel(Base):
    """
    SQLAlchemy ORM model for restaurant_tables table.

    The active session is stored inline; ended sessions are not kept.
    """

    __tablename__ = "restaurant_tables"

    table_number = Column(Integer, primary_key=True, autoincrement=False)
    session_id = Column(String(36), nullable=True)
    session_started_at = Column(DateTime(timezone=True), nullable=True)
