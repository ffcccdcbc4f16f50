"""
Pure age arithmetic (functional core, no I/O).
"""

from __future__ import annotations

import calendar
from datetime import date


def anniversary(birth: date, year: int) -> date:
    """
    Birthday anniversary in the given year.

    29 February falls back to 28 February in non-leap years.
    """
    last_day = calendar.monthrange(year, birth.month)[1]
    return date(year, birth.month, min(birth.day, last_day))


def completed_years(birth: date, today: date) -> int:
    """
    Whole years elapsed between birth and today.

    Raises:
        ValueError: if birth is after today.
    """
    if birth > today:
        raise ValueError(f"date of birth {birth.isoformat()} is after {today.isoformat()}")

    years = today.year - birth.year
    if today < anniversary(birth, today.year):
        years -= 1
    return years
