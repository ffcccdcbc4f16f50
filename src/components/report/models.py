"""
Report component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportInput:
    """Values to report, lists in input order."""

    platform: str
    ids: tuple[str, ...]
    ages: tuple[int, ...]
    avatars: tuple[str, ...]
    prefix: str = "=> "


@dataclass(frozen=True)
class ReportOutput:
    """Output for a report run."""

    lines: tuple[str, ...]
