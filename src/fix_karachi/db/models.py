"""
fix_karachi.db.models

Local provider schema.

Responsibilities:
- Define ORM models standing in for the hosted platform's tables:
  - User: credentials (auth users)
  - UserRole: explicit role rows (only admins get one at sign-up)
  - Profile: citizen display name and reward counters
  - LoginSession: live sign-in sessions (the `session_id` claim of access tokens)
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, Index, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fix_karachi.auth.models import Role
from fix_karachi.db.base import Base


def _utcnow() -> datetime:
    return datetime.utcnow()


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    roles: Mapped[list[UserRole]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    profile: Mapped[Profile | None] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    sessions: Mapped[list[LoginSession]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class UserRole(Base):
    __tablename__ = "user_roles"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
    role: Mapped[Role] = mapped_column(Enum(Role), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="roles")

    __table_args__ = (Index("ux_user_roles_user_role", "user_id", "role", unique=True),)


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the owning user.
    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("users.id"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False, default="")
    points: Mapped[int] = mapped_column(nullable=False, default=0)
    total_reports: Mapped[int] = mapped_column(nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    user: Mapped[User] = relationship(back_populates="profile")


class LoginSession(Base):
    __tablename__ = "sessions"

    # Carried in the access token as `session_id`.
    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="sessions")


# --- Module Notes -----------------------------------------------------------
# The unique (user_id, role) index makes a repeated admin insert fail instead
# of silently duplicating the row.
# A token whose `sessions` row is gone (signed out) no longer identifies anyone,
# even before its `exp`.
