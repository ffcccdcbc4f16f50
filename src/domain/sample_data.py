"""
Sample people shown by the demo.

Ids are generated fresh every time the records are built, so two runs of
the program never share ids while names, emails and dobs stay the same.
"""

from __future__ import annotations

from typing import Final

from src.domain.entities import Person

_SAMPLE_ROWS: Final[tuple[tuple[str, str, str], ...]] = (
    ("Fast Nguyen", "fast.nguyen@work.com", "1995-08-26"),
    ("Andrew Jackson", "andrew.jackson@work.com", "1990-01-12"),
)


def build_sample_people() -> tuple[Person, ...]:
    """Build the sample records with newly generated ids."""
    return tuple(Person(name=name, email=email, dob=dob) for name, email, dob in _SAMPLE_ROWS)


SAMPLE_PEOPLE: Final[tuple[Person, ...]] = build_sample_people()
