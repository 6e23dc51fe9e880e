from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from fix_karachi.db.models import Profile


class ProfileRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, user_id: uuid.UUID, name: str) -> Profile:
        profile = Profile(id=user_id, name=name, points=0, total_reports=0)
        self._session.add(profile)
        await self._session.flush()
        return profile

    async def get(self, user_id: uuid.UUID) -> Profile | None:
        return await self._session.get(Profile, user_id)
