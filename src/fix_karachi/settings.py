"""
fix_karachi.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the web, auth and backend layers.
- Hide secrets from repr/logging (Supabase anon key, local JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Every field can be set through a `FIXKHI_`-prefixed environment variable,
    e.g. `FIXKHI_BACKEND=supabase`.
    """

    model_config = SettingsConfigDict(env_prefix="FIXKHI_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "fix-karachi"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Which identity/data provider backs the app.
    backend: Literal["local", "supabase"] = "local"

    # Hosted provider
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = Field(default="", repr=False)
    supabase_timeout_s: float = 10.0

    # Local provider (tokens + persistence)
    jwt_alg: str = "HS256"
    jwt_issuer: str = "fix-karachi"
    jwt_audience: str = "authenticated"
    # HS256 wants a key of at least 256 bits.
    jwt_secret: str = Field(
        default="dev-only-jwt-secret-change-me-in-prod", min_length=32, repr=False
    )
    access_token_ttl_minutes: int = 60
    password_hash_rounds: int = Field(default=12, ge=4, le=31)
    database_url: str = "sqlite+aiosqlite:///./fix_karachi.db"

    # Web
    site_url: str = "http://localhost:8080"
    default_language: Literal["en", "ur"] = "en"
    session_cookie: str = "fk_session"
    language_cookie: str = "fk_lang"
    cookie_secure: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `backend` selects the client built per request in `fix_karachi.api.deps`;
# the supabase_* fields are ignored by the local provider and vice versa.
