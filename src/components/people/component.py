"""
People component - derived values for person records.

Derives age in whole years from the date of birth and a synthetic avatar
URL from the person id.

Invariants:
- Age is years completed, counted from the birthday anniversary
- Avatar URL is the base URL followed by exactly the id
- Batch outputs keep the input order
"""

from __future__ import annotations

import logging

from src.domain.entities import Person
from src.rules.models import DEFAULT_AVATAR_BASE_URL

from ._impl import completed_years
from .models import DeriveInput, DeriveOutput
from .ports import TodayPort

logger = logging.getLogger(__name__)


def get_person_age(person: Person, *, clock: TodayPort) -> int:
    """
    Age of a person in whole years as of clock.today().

    Raises:
        ValueError: if the date of birth is in the future.
    """
    return completed_years(person.birth_date(), clock.today())


def get_person_avatar(person: Person, *, base_url: str = DEFAULT_AVATAR_BASE_URL) -> str:
    """Avatar image URL for a person. No request is made."""
    if not person.id:
        raise ValueError("person id must not be empty")
    return f"{base_url}{person.id}"


# --- Component Entry Points ---


def run_derive(
    inp: DeriveInput,
    *,
    clock: TodayPort,
    base_url: str = DEFAULT_AVATAR_BASE_URL,
) -> DeriveOutput:
    """
    Derive ids, ages and avatar URLs for every person.

    Args:
        inp: Input containing the people.
        clock: Date provider used for ages.
        base_url: Avatar service prefix.

    Returns:
        DeriveOutput with one entry per person, in input order.
    """
    ids: list[str] = []
    ages: list[int] = []
    avatars: list[str] = []

    for person in inp.people:
        age = get_person_age(person, clock=clock)
        avatar = get_person_avatar(person, base_url=base_url)
        logger.debug("Derived person %s: age=%d avatar=%s", person.id, age, avatar)
        ids.append(person.id)
        ages.append(age)
        avatars.append(avatar)

    return DeriveOutput(ids=tuple(ids), ages=tuple(ages), avatars=tuple(avatars))
