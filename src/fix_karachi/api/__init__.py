"""
fix_karachi.api

HTTP layer (FastAPI).

Responsibilities:
- App factory, dependency wiring, templating and routers for the screens.
"""

# Package marker.
