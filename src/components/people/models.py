"""
People component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Person

# --- Input Models ---


@dataclass(frozen=True)
class DeriveInput:
    """Input for deriving ages and avatars for a list of people."""

    people: tuple[Person, ...]


# --- Output Models ---


@dataclass(frozen=True)
class DeriveOutput:
    """Derived values, each tuple in the same order as the input people."""

    ids: tuple[str, ...]
    ages: tuple[int, ...]
    avatars: tuple[str, ...]
