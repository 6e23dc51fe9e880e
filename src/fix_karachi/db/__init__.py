"""
fix_karachi.db

Persistence package for the local provider (SQLAlchemy async).

Responsibilities:
- Provide ORM models mirroring the hosted platform's auth users, user_roles and
  profiles tables, plus engine/session setup and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only `fix_karachi.backend.local` touches this package; with the hosted
# provider no database is opened by the app.
