"""
tests.conftest

Shared fixtures.

Responsibilities:
- A recording in-memory backend for guard/service tests.
- Test settings backed by a throwaway sqlite file.
- An httpx client bound to the ASGI app with lifespan managed explicitly.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from fix_karachi.api.app import create_app
from fix_karachi.api.deps import backend_client
from fix_karachi.auth.models import AuthSession, Principal, Role, RoleAssignment
from fix_karachi.backend.errors import AuthenticationError
from fix_karachi.backend.models import Profile
from fix_karachi.backend.results import NOT_FOUND, Ok, ProviderError, Result
from fix_karachi.settings import Settings


@dataclass
class FakeBackend:
    """
    Scriptable stand-in for a provider client. Every call is appended to `calls`.
    """

    principal: Principal | None = None
    role: Role | None = None
    profile: Profile | None = None
    principal_error: str | None = None
    principal_exception: Exception | None = None
    role_error: str | None = None
    insert_error: str | None = None
    sign_out_exception: Exception | None = None
    passwords: dict[str, str] = field(default_factory=dict)
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    access_token: str | None = None

    def inserts(self) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == "insert_role_assignment"]

    async def sign_in(self, email: str, password: str) -> AuthSession:
        self.calls.append(("sign_in", (email,)))
        if self.passwords.get(email) != password:
            raise AuthenticationError("Invalid login credentials")
        self.principal = Principal(id=f"id-{email}", email=email)
        self.access_token = f"token-{email}"
        return AuthSession(principal=self.principal, access_token=self.access_token)

    async def sign_up(
        self, email: str, password: str, profile_fields: Mapping[str, str]
    ) -> Principal:
        self.calls.append(("sign_up", (email, dict(profile_fields))))
        if email in self.passwords:
            raise AuthenticationError("User already registered")
        self.passwords[email] = password
        return Principal(id=f"id-{email}", email=email)

    async def sign_out(self) -> None:
        self.calls.append(("sign_out", ()))
        self.principal = None
        self.access_token = None
        if self.sign_out_exception is not None:
            raise self.sign_out_exception

    async def get_current_principal(self) -> Result[Principal]:
        self.calls.append(("get_current_principal", ()))
        if self.principal_exception is not None:
            raise self.principal_exception
        if self.principal_error is not None:
            return ProviderError(self.principal_error)
        if self.principal is None:
            return NOT_FOUND
        return Ok(self.principal)

    async def query_role(self, principal_id: str) -> Result[RoleAssignment]:
        self.calls.append(("query_role", (principal_id,)))
        if self.role_error is not None:
            return ProviderError(self.role_error)
        if self.role is None:
            return NOT_FOUND
        return Ok(RoleAssignment(principal_id=principal_id, role=self.role))

    async def query_profile(self, principal_id: str) -> Result[Profile]:
        self.calls.append(("query_profile", (principal_id,)))
        if self.profile is None:
            return NOT_FOUND
        return Ok(self.profile)

    async def insert_role_assignment(
        self, principal_id: str, role: Role
    ) -> Result[RoleAssignment]:
        self.calls.append(("insert_role_assignment", (principal_id, role)))
        if self.insert_error is not None:
            return ProviderError(self.insert_error)
        return Ok(RoleAssignment(principal_id=principal_id, role=role))

    async def ping(self) -> Result[None]:
        return Ok(None)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        backend="local",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'fix_karachi_test.db'}",
        password_hash_rounds=4,
        log_level="WARNING",
    )


async def _serve(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    async for c in _serve(create_app(settings=settings)):
        yield c


@pytest_asyncio.fixture
async def fake_client(
    settings: Settings, fake_backend: FakeBackend
) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)

    async def _fake() -> AsyncIterator[FakeBackend]:
        yield fake_backend

    app.dependency_overrides[backend_client] = _fake
    async for c in _serve(app):
        yield c
