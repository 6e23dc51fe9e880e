"""
fix_karachi.backend.models

Read models for provider-owned records.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Profile:
    """
    Per-citizen display and reward-tracking record.

    Points and report counts are maintained by the provider when reports are
    verified; the app only reads them.
    """

    id: str
    name: str = ""
    points: int = 0
    total_reports: int = 0
