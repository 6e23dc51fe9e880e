"""
fix_karachi.api.routers.auth

Login / sign-up screen and logout.

Responsibilities:
- Render the auth screen in login or sign-up mode.
- Run the account flows and translate their failures into on-screen notices.
- Own the session cookie lifecycle.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response
from starlette.status import (
    HTTP_303_SEE_OTHER,
    HTTP_400_BAD_REQUEST,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from fix_karachi.api.deps import backend_client, language_dep, settings_dep
from fix_karachi.api.session_cookie import clear_session_cookie, set_session_cookie
from fix_karachi.api.templating import Notice, render
from fix_karachi.auth.guard import LOGIN_PATH
from fix_karachi.auth.models import Role
from fix_karachi.backend.errors import AuthenticationError, ProviderUnavailableError
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.i18n.context import LanguageContext
from fix_karachi.observability.logging import get_logger
from fix_karachi.services.accounts import AccountService
from fix_karachi.settings import Settings

log = get_logger(__name__)

router = APIRouter(tags=["auth"])

AuthMode = Literal["login", "signup"]


def _auth_screen(
    request: Request,
    *,
    mode: AuthMode,
    notice: Notice | None = None,
    form: dict[str, str] | None = None,
    selected_role: Role = Role.citizen,
    status_code: int = 200,
) -> Response:
    return render(
        request,
        "auth.html",
        {
            "mode": mode,
            "notice": notice,
            "form": form or {},
            "selected_role": selected_role.value,
            "roles": list(Role),
        },
        status_code=status_code,
        # Also rendered by the POST handlers; toggling must land on the GET screen.
        next_path=f"{LOGIN_PATH}?mode={mode}",
    )


def _error(language: LanguageContext, message: str) -> Notice:
    return Notice(kind="error", title=language.t("auth.errorTitle"), message=message)


@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse(LOGIN_PATH, status_code=HTTP_303_SEE_OTHER)


@router.get(LOGIN_PATH)
async def auth_screen(request: Request, mode: AuthMode = "login") -> Response:
    return _auth_screen(request, mode=mode)


@router.post(f"{LOGIN_PATH}/login")
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    backend: BackendClient = Depends(backend_client),
    settings: Settings = Depends(settings_dep),
    language: LanguageContext = Depends(language_dep),
) -> Response:
    try:
        outcome = await AccountService(backend=backend).login(email=email, password=password)
    except AuthenticationError as e:
        log.info("auth.sign_in_rejected")
        return _auth_screen(
            request,
            mode="login",
            notice=_error(language, e.message),
            form={"email": email},
            status_code=HTTP_400_BAD_REQUEST,
        )
    except ProviderUnavailableError as e:
        log.warning("backend.provider_error", op="sign_in", detail=str(e))
        return _auth_screen(
            request,
            mode="login",
            notice=_error(language, language.t("errors.serviceUnavailable")),
            form={"email": email},
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = RedirectResponse(outcome.redirect_to, status_code=HTTP_303_SEE_OTHER)
    set_session_cookie(response, settings, outcome.session.access_token)
    return response


@router.post(f"{LOGIN_PATH}/signup")
async def signup(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    role: Role = Form(Role.citizen),
    backend: BackendClient = Depends(backend_client),
    language: LanguageContext = Depends(language_dep),
) -> Response:
    form = {"name": name, "email": email}
    try:
        outcome = await AccountService(backend=backend).register(
            name=name, email=email, password=password, role=role
        )
    except AuthenticationError as e:
        log.info("auth.sign_up_rejected", role=role.value)
        return _auth_screen(
            request,
            mode="signup",
            notice=_error(language, e.message),
            form=form,
            selected_role=role,
            status_code=HTTP_400_BAD_REQUEST,
        )
    except ProviderUnavailableError as e:
        log.warning("backend.provider_error", op="sign_up", detail=str(e))
        return _auth_screen(
            request,
            mode="signup",
            notice=_error(language, language.t("errors.serviceUnavailable")),
            form=form,
            selected_role=role,
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
        )

    if not outcome.role_assigned:
        notice = _error(language, language.t("auth.roleAssignFailed"))
    else:
        notice = Notice(
            kind="success",
            title=language.t("auth.successTitle"),
            message=language.t("auth.signupSuccess"),
        )
    # Sign-up never signs the user in; they log in next.
    return _auth_screen(request, mode="login", notice=notice, form={"email": email})


@router.post("/logout")
async def logout(
    backend: BackendClient = Depends(backend_client),
    settings: Settings = Depends(settings_dep),
) -> RedirectResponse:
    location = await AccountService(backend=backend).logout()
    response = RedirectResponse(location, status_code=HTTP_303_SEE_OTHER)
    clear_session_cookie(response, settings)
    return response


# --- Module Notes -----------------------------------------------------------
# Failure notices are rendered in place (no redirect), so the form keeps the
# user's name and email; passwords are never echoed back.
