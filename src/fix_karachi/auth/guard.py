"""
fix_karachi.auth.guard

Session/role guard for protected screens.

Responsibilities:
- Decide, per screen activation, between login redirect, redirect to the
  principal's own dashboard, or rendering the screen.
- Own the screen paths each role lands on.
- Sign out unconditionally back to the login screen.

State machine (one per activation):
    checking -> unauthenticated   no principal, or any lookup failure -> /auth
    checking -> wrong_role        role differs from the screen's -> own dashboard
    checking -> authorized        render
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from fix_karachi.auth.models import Principal, Role, RoleAssignment
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.backend.results import NotFound, Ok, ProviderError, Result
from fix_karachi.observability.logging import get_logger

log = get_logger(__name__)

LOGIN_PATH = "/auth"

DASHBOARD_PATHS: dict[Role, str] = {
    Role.citizen: "/citizen-dashboard",
    Role.admin: "/admin-dashboard",
}


def dashboard_path(role: Role) -> str:
    return DASHBOARD_PATHS[role]


class GuardState(enum.StrEnum):
    checking = "checking"
    unauthenticated = "unauthenticated"
    wrong_role = "wrong_role"
    authorized = "authorized"


@dataclass(frozen=True, slots=True)
class GuardDecision:
    state: GuardState
    redirect_to: str | None = None
    principal: Principal | None = None
    role: Role | None = None


def resolve_role(result: Result[RoleAssignment]) -> Role | None:
    """
    Turn a role lookup into the role used for routing.

    A principal without a role row is a citizen: only admins get a row at
    sign-up. `None` means the lookup itself failed and the role is unknown.
    """
    match result:
        case Ok(value=assignment):
            return assignment.role
        case NotFound():
            return Role.citizen
        case ProviderError(detail=detail):
            log.warning("backend.provider_error", op="query_role", detail=detail)
            return None
    raise TypeError(f"unexpected role lookup result: {result!r}")


_UNAUTHENTICATED = GuardDecision(state=GuardState.unauthenticated, redirect_to=LOGIN_PATH)


class ScreenGuard:
    def __init__(self, *, backend: BackendClient, required_role: Role) -> None:
        self._backend = backend
        self.required_role = required_role
        self.state = GuardState.checking

    async def check(self) -> GuardDecision:
        try:
            decision = await self._evaluate()
        except Exception:
            # Fail closed: an unexpected provider failure must not open the screen.
            log.exception("guard.check_failed", required_role=self.required_role.value)
            decision = _UNAUTHENTICATED

        self.state = decision.state
        if decision.redirect_to is not None:
            log.info(
                "guard.redirect",
                state=decision.state.value,
                required_role=self.required_role.value,
                location=decision.redirect_to,
            )
        return decision

    async def _evaluate(self) -> GuardDecision:
        match await self._backend.get_current_principal():
            case Ok(value=principal):
                pass
            case NotFound():
                return _UNAUTHENTICATED
            case ProviderError(detail=detail):
                log.warning("backend.provider_error", op="get_current_principal", detail=detail)
                return _UNAUTHENTICATED

        role = resolve_role(await self._backend.query_role(principal.id))
        if role is None:
            return _UNAUTHENTICATED
        if role is not self.required_role:
            return GuardDecision(
                state=GuardState.wrong_role,
                redirect_to=dashboard_path(role),
                principal=principal,
                role=role,
            )
        return GuardDecision(state=GuardState.authorized, principal=principal, role=role)


async def check_screen(backend: BackendClient, required_role: Role) -> GuardDecision:
    return await ScreenGuard(backend=backend, required_role=required_role).check()


async def sign_out(backend: BackendClient) -> str:
    """
    End the provider session and return where to navigate: always the login screen.
    """
    try:
        await backend.sign_out()
    except Exception:
        log.exception("auth.sign_out_failed")
    return LOGIN_PATH


# --- Module Notes -----------------------------------------------------------
# A failed role lookup sends the user to login rather than to the citizen
# dashboard, so a provider outage is never mistaken for "not an admin".
