"""
homefix/database/init_db.py

Creates all tables defined in the SQLAlchemy models.
Used for setting up the initial schema in the connected database.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

from homefix.database.base import Base
from homefix.database import models  # noqa: F401  (registers all mappers)
from homefix.database.session import engine


async def init_db(bind: AsyncEngine = engine) -> None:
    """
    Creates all database tables based on SQLAlchemy models.
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


if __name__ == "__main__":
    asyncio.run(init_db())
