"""
fix_karachi.api.access

FastAPI dependency functions for screen access.

Responsibilities:
- Run the session/role guard for a screen and hand the principal to the endpoint.
- Turn guard redirects into an exception the app maps onto `303 See Other`.
"""

from __future__ import annotations

from fastapi import Depends

from fix_karachi.api.deps import backend_client
from fix_karachi.auth.guard import GuardState, check_screen
from fix_karachi.auth.models import Principal, Role
from fix_karachi.backend.protocol import BackendClient


class RedirectRequired(Exception):
    def __init__(self, location: str) -> None:
        super().__init__(location)
        self.location = location


def require_screen(role: Role):
    async def _dep(backend: BackendClient = Depends(backend_client)) -> Principal:
        decision = await check_screen(backend, role)
        if decision.state is not GuardState.authorized or decision.principal is None:
            raise RedirectRequired(decision.redirect_to or "/")
        return decision.principal

    return _dep


# --- Module Notes -----------------------------------------------------------
# Lives in the web layer: `fix_karachi.auth` only decides, it never imports
# FastAPI wiring. `backend_client` is cached per request by FastAPI, so
# endpoints that also depend on it receive the same client the guard used.
