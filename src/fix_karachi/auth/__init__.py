"""
fix_karachi.auth

Authentication/authorization package.

Responsibilities:
- Identity and role types shared by the backend clients and the web layer.
- JWT helpers for the local provider.
- The session/role guard and its FastAPI dependencies.
"""

# Package marker.
