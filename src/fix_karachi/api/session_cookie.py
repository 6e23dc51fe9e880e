"""
fix_karachi.api.session_cookie

The cookie that carries the provider access token between requests.
"""

from __future__ import annotations

from starlette.responses import Response

from fix_karachi.settings import Settings


def set_session_cookie(response: Response, settings: Settings, access_token: str) -> None:
    response.set_cookie(
        settings.session_cookie,
        access_token,
        max_age=settings.access_token_ttl_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        settings.session_cookie,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
