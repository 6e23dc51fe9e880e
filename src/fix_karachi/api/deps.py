"""
fix_karachi.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the request's language context
  and the request's backend client.
- Encapsulate app.state access patterns (settings, http pool, sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from fix_karachi.backend.local import LocalBackend
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.backend.supabase import SupabaseClient
from fix_karachi.i18n.context import LanguageContext
from fix_karachi.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set by `fix_karachi.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def language_dep(request: Request) -> LanguageContext:
    language = getattr(request.state, "language", None)
    if language is None:
        # Middleware not installed (e.g. a bare router under test).
        language = LanguageContext(settings_dep(request).default_language)
        request.state.language = language
    return language


async def backend_client(
    request: Request,
    settings: Settings = Depends(settings_dep),
) -> AsyncIterator[BackendClient]:
    # One client per request, bound to the session cookie's access token.
    token = request.cookies.get(settings.session_cookie) or None
    if settings.backend == "supabase":
        yield SupabaseClient(settings=settings, http=request.app.state.http, access_token=token)
        return

    async with request.app.state.sessionmaker() as session:
        yield LocalBackend(session=session, settings=settings, access_token=token)


# --- Module Notes -----------------------------------------------------------
# Tests swap the provider with `app.dependency_overrides[backend_client]`.
