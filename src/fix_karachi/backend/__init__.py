"""
fix_karachi.backend

Identity/data provider boundary.

Responsibilities:
- Define the client contract the app relies on (`BackendClient`).
- Provide the hosted implementation (Supabase over httpx) and a self-contained
  local implementation (SQLAlchemy + JWT) for development and tests.
"""

# Package marker; clients are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Routers and services depend on `protocol.BackendClient`, never on a concrete client.
