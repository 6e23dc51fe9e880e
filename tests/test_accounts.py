"""
tests.test_accounts

Login, sign-up and logout flows of `AccountService`.
"""

from __future__ import annotations

import pytest

from fix_karachi.auth.models import Role
from fix_karachi.backend.errors import AuthenticationError, ProviderUnavailableError
from fix_karachi.backend.results import NOT_FOUND
from fix_karachi.services.accounts import AccountService

from tests.conftest import FakeBackend


@pytest.mark.asyncio
async def test_citizen_sign_up_writes_no_role_row(fake_backend: FakeBackend) -> None:
    svc = AccountService(backend=fake_backend)

    outcome = await svc.register(
        name="Ayesha", email="ayesha@example.com", password="secret1", role=Role.citizen
    )

    assert outcome.role is Role.citizen
    assert outcome.role_assigned is True
    assert fake_backend.inserts() == []
    assert ("sign_up", ("ayesha@example.com", {"name": "Ayesha"})) in fake_backend.calls


@pytest.mark.asyncio
async def test_admin_sign_up_writes_exactly_one_admin_row(fake_backend: FakeBackend) -> None:
    svc = AccountService(backend=fake_backend)

    outcome = await svc.register(
        name="Bilal", email="bilal@example.com", password="secret1", role=Role.admin
    )

    assert fake_backend.inserts() == [(outcome.principal.id, Role.admin)]
    assert outcome.role_assigned is True


@pytest.mark.asyncio
async def test_admin_sign_up_reports_failed_role_insert(fake_backend: FakeBackend) -> None:
    fake_backend.insert_error = "permission denied for table user_roles"
    svc = AccountService(backend=fake_backend)

    outcome = await svc.register(
        name="Bilal", email="bilal@example.com", password="secret1", role=Role.admin
    )

    assert len(fake_backend.inserts()) == 1
    assert outcome.role_assigned is False


@pytest.mark.asyncio
async def test_duplicate_sign_up_raises_provider_message(fake_backend: FakeBackend) -> None:
    fake_backend.passwords["dup@example.com"] = "whatever"
    svc = AccountService(backend=fake_backend)

    with pytest.raises(AuthenticationError) as exc:
        await svc.register(name="D", email="dup@example.com", password="secret1", role=Role.admin)

    assert exc.value.message == "User already registered"
    assert fake_backend.inserts() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (None, "/citizen-dashboard"),
        (Role.citizen, "/citizen-dashboard"),
        (Role.admin, "/admin-dashboard"),
    ],
)
async def test_login_routes_by_role(role: Role | None, expected: str) -> None:
    backend = FakeBackend(role=role, passwords={"a@example.com": "secret1"})
    svc = AccountService(backend=backend)

    outcome = await svc.login(email="a@example.com", password="secret1")

    assert outcome.redirect_to == expected
    assert outcome.session.access_token == "token-a@example.com"


@pytest.mark.asyncio
async def test_login_with_bad_password_raises(fake_backend: FakeBackend) -> None:
    fake_backend.passwords["a@example.com"] = "secret1"
    with pytest.raises(AuthenticationError) as exc:
        await AccountService(backend=fake_backend).login(email="a@example.com", password="nope")
    assert exc.value.message == "Invalid login credentials"


@pytest.mark.asyncio
async def test_login_fails_closed_when_role_lookup_fails() -> None:
    backend = FakeBackend(role_error="timeout", passwords={"a@example.com": "secret1"})

    with pytest.raises(ProviderUnavailableError):
        await AccountService(backend=backend).login(email="a@example.com", password="secret1")

    assert ("sign_out", ()) in backend.calls
    assert await backend.get_current_principal() == NOT_FOUND


@pytest.mark.asyncio
async def test_logout_returns_login_path(fake_backend: FakeBackend) -> None:
    fake_backend.passwords["a@example.com"] = "secret1"
    svc = AccountService(backend=fake_backend)
    await svc.login(email="a@example.com", password="secret1")

    assert await svc.logout() == "/auth"
    assert await fake_backend.get_current_principal() == NOT_FOUND
