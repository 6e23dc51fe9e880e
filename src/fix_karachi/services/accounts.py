"""
fix_karachi.services.accounts

Account flows behind the auth screen.

Responsibilities:
- Sign in and pick the dashboard matching the principal's role.
- Sign up, writing an explicit role row only for admins.
- Sign out.
"""

from __future__ import annotations

from dataclasses import dataclass

from fix_karachi.auth.guard import dashboard_path, resolve_role, sign_out
from fix_karachi.auth.models import AuthSession, Principal, Role
from fix_karachi.backend.errors import ProviderUnavailableError
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.backend.results import Ok, ProviderError
from fix_karachi.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LoginOutcome:
    session: AuthSession
    role: Role
    redirect_to: str


@dataclass(frozen=True, slots=True)
class SignupOutcome:
    principal: Principal
    role: Role
    # False when the admin role row could not be written.
    role_assigned: bool = True


class AccountService:
    def __init__(self, *, backend: BackendClient) -> None:
        self._backend = backend

    async def login(self, *, email: str, password: str) -> LoginOutcome:
        # AuthenticationError / ProviderUnavailableError propagate to the screen.
        session = await self._backend.sign_in(email, password)

        role = resolve_role(await self._backend.query_role(session.principal.id))
        if role is None:
            await sign_out(self._backend)
            raise ProviderUnavailableError("role lookup failed after sign-in")

        log.info("auth.signed_in", principal_id=session.principal.id, role=role.value)
        return LoginOutcome(session=session, role=role, redirect_to=dashboard_path(role))

    async def register(
        self, *, name: str, email: str, password: str, role: Role
    ) -> SignupOutcome:
        principal = await self._backend.sign_up(email, password, {"name": name})
        log.info("auth.signed_up", principal_id=principal.id, role=role.value)

        if role is not Role.admin:
            # Citizens get no role row; routing treats "no row" as citizen.
            return SignupOutcome(principal=principal, role=role)

        match await self._backend.insert_role_assignment(principal.id, Role.admin):
            case Ok():
                return SignupOutcome(principal=principal, role=role)
            case ProviderError(detail=detail):
                log.error("auth.role_assign_failed", principal_id=principal.id, detail=detail)
            case other:
                log.error("auth.role_assign_failed", principal_id=principal.id, detail=repr(other))
        return SignupOutcome(principal=principal, role=role, role_assigned=False)

    async def logout(self) -> str:
        return await sign_out(self._backend)


# --- Module Notes -----------------------------------------------------------
# No retries: every failure here ends the user action and the form is shown again.
