from datetime import date

import pytest

from src.adapters.clock import FrozenClock
from src.domain.entities import Person
from src.domain.sample_data import build_sample_people


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Clock frozen at 2026-06-15 00:00 UTC."""
    return FrozenClock(date(2026, 6, 15))


@pytest.fixture
def sample_people() -> tuple[Person, ...]:
    return build_sample_people()


class FakePlatform:
    def __init__(self, name: str = "testos") -> None:
        self._name = name

    def name(self) -> str:
        return self._name


@pytest.fixture
def fake_platform() -> FakePlatform:
    return FakePlatform()
