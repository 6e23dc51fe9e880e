"""
fix_karachi.backend.supabase

Hosted provider client (Supabase auth + REST) over httpx.

Responsibilities:
- Call the auth API (`/auth/v1/*`) for sign-in, sign-up, sign-out and session lookup.
- Read/write the `user_roles` and `profiles` tables through the REST API (`/rest/v1/*`).
- Map HTTP outcomes onto `AuthenticationError` / typed lookup results.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from fix_karachi.auth.models import AuthSession, Principal, Role, RoleAssignment, strongest_role
from fix_karachi.backend.errors import AuthenticationError, ProviderUnavailableError
from fix_karachi.backend.models import Profile
from fix_karachi.backend.results import NOT_FOUND, Ok, ProviderError, Result
from fix_karachi.observability.logging import get_logger
from fix_karachi.settings import Settings

log = get_logger(__name__)


def _error_message(r: httpx.Response) -> str:
    # The auth API has used several error envelopes over time.
    try:
        body = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return r.reason_phrase


def _principal(user: Mapping[str, Any]) -> Principal:
    return Principal(id=str(user["id"]), email=str(user.get("email") or ""))


class SupabaseClient:
    """
    Thin client for one request. The shared `httpx.AsyncClient` must have
    `base_url` set to the project URL.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        access_token: str | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._access_token = access_token

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def _headers(self, *, user: bool = True) -> dict[str, str]:
        # Table reads run as the signed-in user so row level security applies.
        bearer = self._settings.supabase_anon_key
        if user and self._access_token:
            bearer = self._access_token
        return {
            "apikey": self._settings.supabase_anon_key,
            "Authorization": f"Bearer {bearer}",
        }

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            r = await self._http.post(
                "/auth/v1/token",
                params={"grant_type": "password"},
                headers=self._headers(user=False),
                json={"email": email, "password": password},
            )
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(str(e)) from e
        if r.status_code >= 500:
            raise ProviderUnavailableError(f"auth api returned {r.status_code}")
        if r.is_error:
            raise AuthenticationError(_error_message(r))

        body = r.json()
        session = AuthSession(
            principal=_principal(body["user"]),
            access_token=body["access_token"],
            refresh_token=body.get("refresh_token"),
        )
        self._access_token = session.access_token
        return session

    async def sign_up(
        self, email: str, password: str, profile_fields: Mapping[str, str]
    ) -> Principal:
        try:
            r = await self._http.post(
                "/auth/v1/signup",
                params={"redirect_to": f"{self._settings.site_url.rstrip('/')}/"},
                headers=self._headers(user=False),
                json={"email": email, "password": password, "data": dict(profile_fields)},
            )
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(str(e)) from e
        if r.status_code >= 500:
            raise ProviderUnavailableError(f"auth api returned {r.status_code}")
        if r.is_error:
            raise AuthenticationError(_error_message(r))

        body = r.json()
        # With email confirmation on, the user object is returned bare;
        # otherwise it is wrapped in a session.
        user = body.get("user") if isinstance(body.get("user"), dict) else body
        if not isinstance(user, dict) or "id" not in user:
            raise ProviderUnavailableError("sign-up response carried no user")
        return _principal(user)

    async def sign_out(self) -> None:
        if not self._access_token:
            return
        try:
            r = await self._http.post("/auth/v1/logout", headers=self._headers())
            if r.is_error and r.status_code not in (401, 403, 404):
                log.warning("backend.sign_out_failed", status=r.status_code)
        except httpx.HTTPError as e:
            log.warning("backend.sign_out_failed", error=str(e))
        finally:
            self._access_token = None

    async def get_current_principal(self) -> Result[Principal]:
        if not self._access_token:
            return NOT_FOUND
        try:
            r = await self._http.get("/auth/v1/user", headers=self._headers())
        except httpx.HTTPError as e:
            return ProviderError(str(e))
        if r.status_code in (401, 403):
            # Expired or revoked session.
            return NOT_FOUND
        if r.is_error:
            return ProviderError(f"auth api returned {r.status_code}: {_error_message(r)}")
        return Ok(_principal(r.json()))

    async def query_role(self, principal_id: str) -> Result[RoleAssignment]:
        rows = await self._select("user_roles", select="role", filters={"user_id": principal_id})
        if isinstance(rows, ProviderError):
            return rows
        role = strongest_role(row.get("role") for row in rows)
        if role is None:
            return NOT_FOUND
        return Ok(RoleAssignment(principal_id=principal_id, role=role))

    async def query_profile(self, principal_id: str) -> Result[Profile]:
        rows = await self._select(
            "profiles", select="id,name,points,total_reports", filters={"id": principal_id}
        )
        if isinstance(rows, ProviderError):
            return rows
        if not rows:
            return NOT_FOUND
        row = rows[0]
        return Ok(
            Profile(
                id=str(row.get("id", principal_id)),
                name=row.get("name") or "",
                points=int(row.get("points") or 0),
                total_reports=int(row.get("total_reports") or 0),
            )
        )

    async def insert_role_assignment(
        self, principal_id: str, role: Role
    ) -> Result[RoleAssignment]:
        try:
            r = await self._http.post(
                "/rest/v1/user_roles",
                headers={**self._headers(), "Prefer": "return=minimal"},
                json=[{"user_id": principal_id, "role": role.value}],
            )
        except httpx.HTTPError as e:
            return ProviderError(str(e))
        if r.is_error:
            return ProviderError(f"rest api returned {r.status_code}: {_error_message(r)}")
        return Ok(RoleAssignment(principal_id=principal_id, role=role))

    async def ping(self) -> Result[None]:
        try:
            r = await self._http.get("/auth/v1/health", headers=self._headers(user=False))
        except httpx.HTTPError as e:
            return ProviderError(str(e))
        if r.is_error:
            return ProviderError(f"auth api returned {r.status_code}")
        return Ok(None)

    async def _select(
        self, table: str, *, select: str, filters: Mapping[str, str]
    ) -> list[dict[str, Any]] | ProviderError:
        params = {"select": select, **{k: f"eq.{v}" for k, v in filters.items()}}
        try:
            r = await self._http.get(f"/rest/v1/{table}", params=params, headers=self._headers())
        except httpx.HTTPError as e:
            return ProviderError(str(e))
        if r.is_error:
            return ProviderError(f"rest api returned {r.status_code}: {_error_message(r)}")
        body = r.json()
        if not isinstance(body, list):
            return ProviderError(f"unexpected {table} payload")
        return body


# --- Module Notes -----------------------------------------------------------
# Refresh tokens are not rotated: when the access token expires the guard sees
# NotFound and sends the user back to the login screen.
