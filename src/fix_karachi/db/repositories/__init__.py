"""
fix_karachi.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for the local provider.
"""

# Package marker; repositories are imported directly from submodules.
