"""
fix_karachi.api.app

FastAPI app factory for the Fix Karachi web application.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the provider infrastructure (HTTP pool or local DB engine).
- Map guard redirects onto `303 See Other` responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from fix_karachi import __version__
from fix_karachi.api.access import RedirectRequired
from fix_karachi.api.routers.auth import router as auth_router
from fix_karachi.api.routers.dashboards import router as dashboards_router
from fix_karachi.api.routers.health import router as health_router
from fix_karachi.api.routers.language import router as language_router
from fix_karachi.api.session_cookie import clear_session_cookie
from fix_karachi.auth.guard import LOGIN_PATH
from fix_karachi.db.init_db import init_db
from fix_karachi.db.session import create_engine, create_sessionmaker
from fix_karachi.observability.logging import configure_logging, get_logger
from fix_karachi.observability.middleware import RequestContextMiddleware
from fix_karachi.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        fmt=settings.log_format,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, backend=settings.backend)
        if settings.backend == "supabase":
            # One pooled client for the process; per-request clients share it.
            app.state.http = httpx.AsyncClient(
                base_url=settings.supabase_url.rstrip("/"),
                timeout=settings.supabase_timeout_s,
            )
        else:
            engine = create_engine(settings)
            app.state.engine = engine
            app.state.sessionmaker = create_sessionmaker(engine)
            if settings.env in ("dev", "test"):
                await init_db(engine)
        try:
            yield
        finally:
            http = getattr(app.state, "http", None)
            if http is not None:
                await http.aclose()
            engine = getattr(app.state, "engine", None)
            if engine is not None:
                await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Fix Karachi",
        version=__version__,
        docs_url="/docs" if settings.env != "prod" else None,
        openapi_url="/openapi.json" if settings.env != "prod" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        RequestContextMiddleware,
        language_cookie=settings.language_cookie,
        default_language=settings.default_language,
        cookie_secure=settings.cookie_secure,
    )
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(dashboards_router)
    app.include_router(language_router)

    @app.exception_handler(RedirectRequired)
    async def _redirect(_: Request, exc: RedirectRequired) -> RedirectResponse:
        response = RedirectResponse(exc.location, status_code=HTTP_303_SEE_OTHER)
        if exc.location == LOGIN_PATH:
            # Whatever token we had is no good; drop it.
            clear_session_cookie(response, settings)
        return response

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; account flows live in `services.accounts` and
# access decisions in `auth.guard`.
