"""
fix_karachi.backend.protocol

The client contract the application needs from its identity/data provider.

Responsibilities:
- Name the seven provider operations the screens use, plus a readiness ping.
- Fix their failure semantics: explicit auth actions raise, lookups return results.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from fix_karachi.auth.models import AuthSession, Principal, Role, RoleAssignment
from fix_karachi.backend.models import Profile
from fix_karachi.backend.results import Result


class BackendClient(Protocol):
    """
    One instance serves one request and is bound to that request's access token.

    `sign_in` adopts the new session's token; `sign_out` drops it, after which
    `get_current_principal` returns `NotFound`.
    """

    @property
    def access_token(self) -> str | None: ...

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Raises AuthenticationError or ProviderUnavailableError."""
        ...

    async def sign_up(
        self, email: str, password: str, profile_fields: Mapping[str, str]
    ) -> Principal:
        """Raises AuthenticationError or ProviderUnavailableError."""
        ...

    async def sign_out(self) -> None: ...

    async def get_current_principal(self) -> Result[Principal]: ...

    async def query_role(self, principal_id: str) -> Result[RoleAssignment]: ...

    async def query_profile(self, principal_id: str) -> Result[Profile]: ...

    async def insert_role_assignment(
        self, principal_id: str, role: Role
    ) -> Result[RoleAssignment]: ...

    async def ping(self) -> Result[None]: ...


# --- Module Notes -----------------------------------------------------------
# Implementations: `backend.supabase.SupabaseClient`, `backend.local.LocalBackend`.
