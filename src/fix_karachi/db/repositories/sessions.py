"""
fix_karachi.db.repositories.sessions

Repository for `LoginSession` rows.

Responsibilities:
- Record a session at sign-in.
- Look a session up when a token is presented.
- Delete it at sign-out.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from fix_karachi.db.models import LoginSession


class LoginSessionRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, user_id: uuid.UUID, expires_at: datetime) -> LoginSession:
        row = LoginSession(id=uuid.uuid4(), user_id=user_id, expires_at=expires_at)
        self._session.add(row)
        await self._session.flush()
        return row

    async def get(self, session_id: uuid.UUID) -> LoginSession | None:
        return await self._session.get(LoginSession, session_id)

    async def delete(self, session_id: uuid.UUID) -> bool:
        row = await self.get(session_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True
