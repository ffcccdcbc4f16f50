"""
People component port definitions.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


class TodayPort(Protocol):
    """Calendar date provider."""

    def today(self) -> date:
        """Get the current date."""
        ...
