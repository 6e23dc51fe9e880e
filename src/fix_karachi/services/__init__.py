"""
fix_karachi.services

Application service layer.

Responsibilities:
- Hold the account flows (login, sign-up, logout) so routers stay thin.
"""

# Package marker.
