"""
fix_karachi.auth.jwt

JWT issuing and validation helpers for the local provider.

Responsibilities:
- Issue access tokens shaped like the hosted provider's (sub/email/role/aud).
- Decode and validate tokens with strict claim requirements (iss/aud/exp/iat/sub).

Note:
- The hosted provider validates its own tokens; these helpers are only used by
  `fix_karachi.backend.local`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from fix_karachi.auth.models import Principal
from fix_karachi.settings import Settings


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    issuer: str
    audience: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            secret=settings.jwt_secret,
        )


class JwtValidationError(Exception):
    pass


def issue_access_token(
    *,
    cfg: JwtConfig,
    principal: Principal,
    ttl: timedelta = timedelta(hours=1),
    session_id: str | None = None,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now(tz=UTC)
    # `role` is the database role of the hosted platform, not the app role.
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": principal.id,
        "email": principal.email,
        "role": "authenticated",
        "session_id": session_id or str(uuid.uuid4()),
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_and_validate(
    *, cfg: JwtConfig, token: str, verify_exp: bool = True
) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
                "verify_exp": verify_exp,
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e
