"""
fix_karachi.backend.local

Self-contained provider for development and tests.

Responsibilities:
- Emulate the hosted auth API: bcrypt-hashed credentials, HS256 access tokens
  shaped like the hosted ones, provider-style error messages.
- Keep server-side sessions so sign-out revokes the token it was called with.
- Emulate the hosted tables (`user_roles`, `profiles`) on the local database,
  including the profile row the hosted platform creates with a trigger at sign-up.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

import bcrypt
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fix_karachi.auth.jwt import (
    JwtConfig,
    JwtValidationError,
    decode_and_validate,
    issue_access_token,
)
from fix_karachi.auth.models import AuthSession, Principal, Role, RoleAssignment, strongest_role
from fix_karachi.backend.errors import AuthenticationError, ProviderUnavailableError
from fix_karachi.backend.models import Profile
from fix_karachi.backend.results import NOT_FOUND, Ok, ProviderError, Result
from fix_karachi.db.repositories.profiles import ProfileRepo
from fix_karachi.db.repositories.roles import UserRoleRepo
from fix_karachi.db.repositories.sessions import LoginSessionRepo
from fix_karachi.db.repositories.users import UserRepo
from fix_karachi.observability.logging import get_logger
from fix_karachi.settings import Settings

log = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes.
MAX_PASSWORD_BYTES = 72

INVALID_CREDENTIALS = "Invalid login credentials"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _parse_id(principal_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(principal_id)
    except ValueError:
        return None


class LocalBackend:
    def __init__(
        self,
        *,
        session: AsyncSession,
        settings: Settings,
        access_token: str | None = None,
    ) -> None:
        self._session = session
        self._settings = settings
        self._jwt = JwtConfig.from_settings(settings)
        self._access_token = access_token

        self._users = UserRepo(session)
        self._roles = UserRoleRepo(session)
        self._profiles = ProfileRepo(session)
        self._sessions = LoginSessionRepo(session)

    @property
    def access_token(self) -> str | None:
        return self._access_token

    async def sign_in(self, email: str, password: str) -> AuthSession:
        password_bytes = password.encode("utf-8")
        try:
            user = await self._users.get_by_email(_normalize_email(email))
        except SQLAlchemyError as e:
            raise ProviderUnavailableError(str(e)) from e
        if user is None or len(password_bytes) > MAX_PASSWORD_BYTES:
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not bcrypt.checkpw(password_bytes, user.password_hash.encode("ascii")):
            raise AuthenticationError(INVALID_CREDENTIALS)

        principal = Principal(id=str(user.id), email=user.email)
        now = datetime.now(tz=UTC)
        ttl = timedelta(minutes=self._settings.access_token_ttl_minutes)
        try:
            row = await self._sessions.create(
                user_id=user.id, expires_at=(now + ttl).replace(tzinfo=None)
            )
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise ProviderUnavailableError(str(e)) from e

        token = issue_access_token(
            cfg=self._jwt,
            principal=principal,
            ttl=ttl,
            session_id=str(row.id),
            now=now,
        )
        self._access_token = token
        return AuthSession(principal=principal, access_token=token)

    async def sign_up(
        self, email: str, password: str, profile_fields: Mapping[str, str]
    ) -> Principal:
        normalized = _normalize_email(email)
        if "@" not in normalized.strip("@"):
            raise AuthenticationError("Unable to validate email address: invalid format")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthenticationError(
                f"Password should be at least {MIN_PASSWORD_LENGTH} characters."
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise AuthenticationError(
                f"Password cannot be longer than {MAX_PASSWORD_BYTES} characters"
            )

        try:
            if await self._users.get_by_email(normalized) is not None:
                raise AuthenticationError("User already registered")
            password_hash = bcrypt.hashpw(
                password.encode("utf-8"),
                bcrypt.gensalt(rounds=self._settings.password_hash_rounds),
            ).decode("ascii")
            user = await self._users.create(email=normalized, password_hash=password_hash)
            await self._profiles.create(user_id=user.id, name=profile_fields.get("name", ""))
            await self._session.commit()
        except IntegrityError as e:
            # Concurrent sign-up with the same email.
            await self._session.rollback()
            raise AuthenticationError("User already registered") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise ProviderUnavailableError(str(e)) from e

        return Principal(id=str(user.id), email=user.email)

    async def sign_out(self) -> None:
        try:
            session_id = self._session_id()
            if session_id is not None:
                await self._sessions.delete(session_id)
                await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            log.warning("backend.sign_out_failed", error=str(e))
        finally:
            self._access_token = None

    def _session_id(self) -> uuid.UUID | None:
        # Signature is checked; expiry is not, so an expired session can still be ended.
        if not self._access_token:
            return None
        try:
            claims = decode_and_validate(
                cfg=self._jwt, token=self._access_token, verify_exp=False
            )
        except JwtValidationError:
            return None
        return _parse_id(str(claims.get("session_id", "")))

    async def get_current_principal(self) -> Result[Principal]:
        if not self._access_token:
            return NOT_FOUND
        try:
            claims = decode_and_validate(cfg=self._jwt, token=self._access_token)
        except JwtValidationError as e:
            log.info("backend.token_rejected", reason=str(e))
            return NOT_FOUND

        user_id = _parse_id(str(claims.get("sub", "")))
        session_id = _parse_id(str(claims.get("session_id", "")))
        if user_id is None or session_id is None:
            return NOT_FOUND
        try:
            row = await self._sessions.get(session_id)
            if row is None or row.user_id != user_id:
                log.info("backend.session_revoked", principal_id=str(user_id))
                return NOT_FOUND
            user = await self._users.get(user_id)
        except SQLAlchemyError as e:
            return ProviderError(str(e))
        if user is None:
            return NOT_FOUND
        return Ok(Principal(id=str(user.id), email=user.email))

    async def query_role(self, principal_id: str) -> Result[RoleAssignment]:
        user_id = _parse_id(principal_id)
        if user_id is None:
            return NOT_FOUND
        try:
            roles = await self._roles.roles_for_user(user_id)
        except SQLAlchemyError as e:
            return ProviderError(str(e))
        role = strongest_role(roles)
        if role is None:
            return NOT_FOUND
        return Ok(RoleAssignment(principal_id=principal_id, role=role))

    async def query_profile(self, principal_id: str) -> Result[Profile]:
        user_id = _parse_id(principal_id)
        if user_id is None:
            return NOT_FOUND
        try:
            row = await self._profiles.get(user_id)
        except SQLAlchemyError as e:
            return ProviderError(str(e))
        if row is None:
            return NOT_FOUND
        return Ok(
            Profile(
                id=str(row.id),
                name=row.name,
                points=row.points,
                total_reports=row.total_reports,
            )
        )

    async def insert_role_assignment(
        self, principal_id: str, role: Role
    ) -> Result[RoleAssignment]:
        user_id = _parse_id(principal_id)
        if user_id is None:
            return ProviderError(f"invalid principal id: {principal_id!r}")
        try:
            await self._roles.add(user_id=user_id, role=role)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            return ProviderError(str(e))
        return Ok(RoleAssignment(principal_id=principal_id, role=role))

    async def ping(self) -> Result[None]:
        try:
            await self._session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            return ProviderError(str(e))
        return Ok(None)


# --- Module Notes -----------------------------------------------------------
# Access tokens are only honoured while their `sessions` row exists, so
# sign-out revokes every copy of the token, not just the one in this client.
