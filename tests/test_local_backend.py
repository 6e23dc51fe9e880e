"""
tests.test_local_backend

The self-contained provider against a throwaway sqlite database.
"""

from __future__ import annotations

import warnings
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fix_karachi.auth.jwt import JwtConfig, decode_and_validate, issue_access_token
from fix_karachi.auth.models import Principal, Role, RoleAssignment
from fix_karachi.backend.errors import AuthenticationError
from fix_karachi.backend.local import LocalBackend
from fix_karachi.backend.models import Profile
from fix_karachi.backend.results import NOT_FOUND, Ok
from fix_karachi.db.init_db import init_db
from fix_karachi.db.session import create_engine, create_sessionmaker
from fix_karachi.settings import Settings

OTHER_SECRET = "another-deployment-jwt-secret-0123456789"


@pytest_asyncio.fixture
async def sessions(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_sign_up_creates_profile_but_no_role_row(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        principal = await backend.sign_up("Zara@Example.com ", "secret1", {"name": "Zara"})

        assert principal.email == "zara@example.com"
        assert await backend.query_role(principal.id) == NOT_FOUND
        assert await backend.query_profile(principal.id) == Ok(
            Profile(id=principal.id, name="Zara", points=0, total_reports=0)
        )


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        with pytest.raises(AuthenticationError) as exc:
            await backend.sign_up("ZARA@example.com", "secret2", {"name": "Other"})
    assert exc.value.message == "User already registered"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("email", "password"),
    [("zara@example.com", "12345"), ("not-an-email", "secret1"), ("z@e.com", "x" * 73)],
)
async def test_sign_up_validation(sessions, settings: Settings, email: str, password: str) -> None:
    async with sessions() as session:
        with pytest.raises(AuthenticationError):
            await LocalBackend(session=session, settings=settings).sign_up(email, password, {})


@pytest.mark.asyncio
async def test_sign_in_issues_token_usable_by_next_request(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        principal = await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        auth = await backend.sign_in("zara@example.com", "secret1")
        assert backend.access_token == auth.access_token

    async with sessions() as session:
        later = LocalBackend(session=session, settings=settings, access_token=auth.access_token)
        assert await later.get_current_principal() == Ok(principal)


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["wrong-password", "x" * 100])
async def test_sign_in_rejects_bad_password(sessions, settings: Settings, password: str) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        with pytest.raises(AuthenticationError) as exc:
            await backend.sign_in("zara@example.com", password)
    assert exc.value.message == "Invalid login credentials"


@pytest.mark.asyncio
async def test_tampered_or_foreign_token_is_not_found(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        auth = await backend.sign_in("zara@example.com", "secret1")

    other = settings.model_copy(update={"jwt_secret": OTHER_SECRET})
    async with sessions() as session:
        assert await LocalBackend(
            session=session, settings=other, access_token=auth.access_token
        ).get_current_principal() == NOT_FOUND
        assert await LocalBackend(
            session=session, settings=settings, access_token=auth.access_token + "x"
        ).get_current_principal() == NOT_FOUND


@pytest.mark.asyncio
async def test_admin_role_insert_is_read_back(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        principal = await backend.sign_up("admin@example.com", "secret1", {"name": "Admin"})
        inserted = await backend.insert_role_assignment(principal.id, Role.admin)

        expected = Ok(RoleAssignment(principal_id=principal.id, role=Role.admin))
        assert inserted == expected
        assert await backend.query_role(principal.id) == expected


@pytest.mark.asyncio
async def test_sign_out_ends_session_for_this_client(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        await backend.sign_in("zara@example.com", "secret1")

        await backend.sign_out()

        assert backend.access_token is None
        assert await backend.get_current_principal() == NOT_FOUND


@pytest.mark.asyncio
async def test_lookups_with_malformed_ids_are_not_found(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        assert await backend.query_role("not-a-uuid") == NOT_FOUND
        assert await backend.query_profile("not-a-uuid") == NOT_FOUND
        assert isinstance(await backend.ping(), Ok)


@pytest.mark.asyncio
async def test_sign_out_revokes_copies_of_the_token(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        principal = await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        auth = await backend.sign_in("zara@example.com", "secret1")

    async with sessions() as session:
        copy = LocalBackend(session=session, settings=settings, access_token=auth.access_token)
        assert await copy.get_current_principal() == Ok(principal)

    async with sessions() as session:
        await LocalBackend(
            session=session, settings=settings, access_token=auth.access_token
        ).sign_out()

    async with sessions() as session:
        replay = LocalBackend(session=session, settings=settings, access_token=auth.access_token)
        assert await replay.get_current_principal() == NOT_FOUND


@pytest.mark.asyncio
async def test_each_sign_in_is_a_separate_session(sessions, settings: Settings) -> None:
    async with sessions() as session:
        backend = LocalBackend(session=session, settings=settings)
        principal = await backend.sign_up("zara@example.com", "secret1", {"name": "Zara"})
        phone = await backend.sign_in("zara@example.com", "secret1")
        laptop = await backend.sign_in("zara@example.com", "secret1")
        await backend.sign_out()

    async with sessions() as session:
        assert await LocalBackend(
            session=session, settings=settings, access_token=phone.access_token
        ).get_current_principal() == Ok(principal)
        assert await LocalBackend(
            session=session, settings=settings, access_token=laptop.access_token
        ).get_current_principal() == NOT_FOUND


def test_tokens_round_trip_without_key_length_warnings(settings: Settings) -> None:
    cfg = JwtConfig.from_settings(settings)
    principal = Principal(id="0b6f6a4e-1111-4222-8333-944455556666", email="z@example.com")

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        token = issue_access_token(cfg=cfg, principal=principal, session_id="s-1")
        claims = decode_and_validate(cfg=cfg, token=token)

    assert claims["sub"] == principal.id
    assert claims["session_id"] == "s-1"


def test_short_jwt_secret_is_rejected() -> None:
    assert len(Settings().jwt_secret.encode("utf-8")) >= 32
    with pytest.raises(ValidationError):
        Settings(jwt_secret="dev-secret-change-me")
