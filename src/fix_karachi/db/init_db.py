"""
fix_karachi.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the local provider's tables for development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from fix_karachi.db import models  # noqa: F401  # register tables on Base.metadata
from fix_karachi.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
