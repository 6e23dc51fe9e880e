"""
fix_karachi.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity (`Principal`) and its session handle.
- Define the closed set of application roles and the role assignment record.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Role(enum.StrEnum):
    # Values match the `role` column of the provider's user_roles table.
    citizen = "citizen"
    admin = "admin"


def strongest_role(values: Iterable[object]) -> Role | None:
    """
    Collapse raw role rows into one role; admin wins, unknown values are ignored.
    """
    found: Role | None = None
    for v in values:
        try:
            role = Role(str(v))
        except ValueError:
            continue
        if role is Role.admin:
            return role
        found = role
    return found


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated identity as returned by the identity provider.
    """

    id: str
    email: str


@dataclass(frozen=True, slots=True)
class RoleAssignment:
    principal_id: str
    role: Role


@dataclass(frozen=True, slots=True)
class AuthSession:
    principal: Principal
    access_token: str = ""
    refresh_token: str | None = None

    def __repr__(self) -> str:
        # Tokens stay out of logs and tracebacks.
        return f"AuthSession(principal={self.principal!r})"


# --- Module Notes -----------------------------------------------------------
# Principals are never mutated by the application; profile data lives in
# `fix_karachi.backend.models.Profile`.
