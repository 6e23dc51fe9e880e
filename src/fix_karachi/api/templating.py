"""
fix_karachi.api.templating

Jinja2 rendering helpers.

Responsibilities:
- Locate the packaged templates.
- Inject the request's translator and language into every template.
- Tell the language toggle which screen to come back to.
- Model the dismissable notice shown on the auth screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from fix_karachi.api.deps import language_dep
from fix_karachi.auth.guard import LOGIN_PATH

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@dataclass(frozen=True, slots=True)
class Notice:
    kind: Literal["success", "error"]
    title: str
    message: str


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    *,
    status_code: int = 200,
    next_path: str | None = None,
) -> Response:
    language = language_dep(request)
    ctx: dict[str, Any] = {
        "t": language.t,
        "lang": language,
        "notice": None,
        "next_path": next_path or screen_path(request),
    }
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)


def screen_path(request: Request) -> str:
    """
    Where re-requesting this screen lands: the URL itself for GET screens.

    Screens rendered by a form POST have no GET twin under the same URL, so
    those callers pass `next_path` to `render` explicitly.
    """
    if request.method != "GET":
        return LOGIN_PATH
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path
