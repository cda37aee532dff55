"""Declarative base shared by all ORM models."""

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import declarative_base


Base = declarative_base()


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
