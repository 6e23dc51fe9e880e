"""
fix_karachi.observability.middleware

HTTP middleware for request-scoped context.

Responsibilities:
- Generate/propagate request IDs and bind request metadata into structlog contextvars.
- Build the request's `LanguageContext` from the language cookie and persist
  the cookie whenever the context reports a language change.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from fix_karachi.i18n.context import LanguageContext

LANGUAGE_COOKIE_MAX_AGE = 365 * 24 * 3600


class RequestContextMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        *,
        language_cookie: str,
        default_language: str,
        cookie_secure: bool = False,
    ) -> None:
        super().__init__(app)
        self._language_cookie = language_cookie
        self._default_language = default_language
        self._cookie_secure = cookie_secure

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

        language = LanguageContext(
            request.cookies.get(self._language_cookie) or self._default_language
        )
        changes: list[str] = []
        unsubscribe = language.subscribe(changes.append)
        request.state.language = language

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
            lang=language.language,
        )
        try:
            response: Response = await call_next(request)
        finally:
            unsubscribe()
            structlog.contextvars.clear_contextvars()

        if changes:
            response.set_cookie(
                self._language_cookie,
                changes[-1],
                max_age=LANGUAGE_COOKIE_MAX_AGE,
                samesite="lax",
                secure=self._cookie_secure,
            )
        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Endpoints only ever call `request.state.language.toggle_language()`; writing
# the cookie is this middleware's reaction to the change notification.
