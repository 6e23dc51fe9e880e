"""
fix_karachi.api.routers.language

English/Urdu toggle.

Responsibilities:
- Flip the request's language context and send the user back to the screen
  they came from, which then re-renders in the new language.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse
from starlette.status import HTTP_303_SEE_OTHER

from fix_karachi.api.deps import language_dep
from fix_karachi.auth.guard import LOGIN_PATH
from fix_karachi.i18n.context import LanguageContext

router = APIRouter(prefix="/language", tags=["language"])


def safe_next(path: str | None) -> str:
    # Only local absolute paths; "//host" and "/\host" are browser-relative URLs.
    if not path or not path.startswith("/") or path.startswith(("//", "/\\")):
        return LOGIN_PATH
    return path


@router.post("/toggle")
async def toggle_language(
    next_path: str = Form(LOGIN_PATH, alias="next"),
    language: LanguageContext = Depends(language_dep),
) -> RedirectResponse:
    # The cookie is written by RequestContextMiddleware on change notification.
    language.toggle_language()
    return RedirectResponse(safe_next(next_path), status_code=HTTP_303_SEE_OTHER)
