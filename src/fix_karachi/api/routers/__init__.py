"""
fix_karachi.api.routers

Screen and probe routers.
"""

# Package marker; routers are imported directly from submodules.
