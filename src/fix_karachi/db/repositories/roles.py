"""
fix_karachi.db.repositories.roles

Repository for `UserRole` rows.

Responsibilities:
- Append role rows (sign-up with the admin role).
- List a user's raw role values for role resolution.
"""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fix_karachi.auth.models import Role
from fix_karachi.db.models import UserRole


class UserRoleRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, user_id: uuid.UUID, role: Role) -> UserRole:
        row = UserRole(user_id=user_id, role=role)
        self._session.add(row)
        await self._session.flush()
        return row

    async def roles_for_user(self, user_id: uuid.UUID) -> list[Role]:
        stmt = select(UserRole.role).where(UserRole.user_id == user_id)
        return list((await self._session.execute(stmt)).scalars().all())
