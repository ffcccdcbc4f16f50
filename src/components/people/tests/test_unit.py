"""
People component unit tests.

Tests for age and avatar derivation.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.adapters.clock import FrozenClock
from src.components.people import (
    DeriveInput,
    anniversary,
    completed_years,
    get_person_age,
    get_person_avatar,
    run_derive,
)
from src.domain.entities import Person
from src.domain.sample_data import build_sample_people

TODAY = date(2026, 6, 15)


def _person(dob: str, **kwargs: str) -> Person:
    return Person(name="Test Person", email="test.person@work.com", dob=dob, **kwargs)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(TODAY)


# --- Age Tests ---


class TestGetPersonAge:
    def test_exact_anniversary(self, clock: FrozenClock) -> None:
        """dob exactly N years ago gives N."""
        assert get_person_age(_person("2000-06-15"), clock=clock) == 26

    def test_day_before_anniversary(self, clock: FrozenClock) -> None:
        """One day short of the anniversary gives N-1."""
        assert get_person_age(_person("2000-06-16"), clock=clock) == 25

    def test_day_after_anniversary(self, clock: FrozenClock) -> None:
        assert get_person_age(_person("2000-06-14"), clock=clock) == 26

    def test_not_calendar_year_subtraction(self, clock: FrozenClock) -> None:
        """Born late in the year: still counts completed years only."""
        assert get_person_age(_person("2025-12-31"), clock=clock) == 0

    def test_born_today(self, clock: FrozenClock) -> None:
        assert get_person_age(_person("2026-06-15"), clock=clock) == 0

    def test_future_dob_rejected(self, clock: FrozenClock) -> None:
        with pytest.raises(ValueError, match="after"):
            get_person_age(_person("2026-06-16"), clock=clock)

    def test_age_ticks_over_when_clock_advances(self) -> None:
        clock = FrozenClock(date(2026, 6, 14))
        person = _person("2000-06-15")
        assert get_person_age(person, clock=clock) == 25

        clock.advance(timedelta(days=1))
        assert get_person_age(person, clock=clock) == 26

    def test_sample_people_ages(self, clock: FrozenClock) -> None:
        ages = [get_person_age(p, clock=clock) for p in build_sample_people()]
        assert ages == [30, 36]


class TestLeapDayBirthdays:
    def test_anniversary_clamped_in_common_year(self) -> None:
        assert anniversary(date(2000, 2, 29), 2001) == date(2001, 2, 28)

    def test_anniversary_kept_in_leap_year(self) -> None:
        assert anniversary(date(2000, 2, 29), 2004) == date(2004, 2, 29)

    def test_counts_on_feb_28_in_common_year(self) -> None:
        birth = date(2000, 2, 29)
        assert completed_years(birth, date(2001, 2, 27)) == 0
        assert completed_years(birth, date(2001, 2, 28)) == 1

    def test_waits_for_feb_29_in_leap_year(self) -> None:
        birth = date(2000, 2, 29)
        assert completed_years(birth, date(2004, 2, 28)) == 3
        assert completed_years(birth, date(2004, 2, 29)) == 4


# --- Avatar Tests ---


class TestGetPersonAvatar:
    def test_default_base_url(self) -> None:
        person = _person("1990-01-12", id="abc-123")
        assert get_person_avatar(person) == "https://robohash.org/abc-123"

    def test_prefix_followed_by_exact_id(self) -> None:
        person = _person("1990-01-12")
        url = get_person_avatar(person)
        assert url.startswith("https://robohash.org/")
        assert url[len("https://robohash.org/") :] == person.id

    def test_custom_base_url(self) -> None:
        person = _person("1990-01-12", id="xyz")
        assert get_person_avatar(person, base_url="https://example.test/a/") == (
            "https://example.test/a/xyz"
        )

    def test_distinct_ids_give_distinct_urls(self) -> None:
        people = [_person("1990-01-12") for _ in range(20)]
        urls = {get_person_avatar(p) for p in people}
        assert len(urls) == 20

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="id"):
            get_person_avatar(_person("1990-01-12", id=""))


# --- Batch Tests ---


class TestRunDerive:
    def test_sample_people(self, clock: FrozenClock) -> None:
        people = build_sample_people()
        result = run_derive(DeriveInput(people=people), clock=clock)

        assert len(result.ages) == 2
        assert len(result.avatars) == 2
        assert result.ids == tuple(p.id for p in people)
        assert result.ages == (30, 36)
        assert result.avatars == tuple(f"https://robohash.org/{p.id}" for p in people)

    def test_preserves_input_order(self, clock: FrozenClock) -> None:
        people = (_person("2010-01-01"), _person("1980-01-01"), _person("2000-01-01"))
        result = run_derive(DeriveInput(people=people), clock=clock)
        assert result.ages == (16, 46, 26)

    def test_empty_input(self, clock: FrozenClock) -> None:
        result = run_derive(DeriveInput(people=()), clock=clock)
        assert result.ids == ()
        assert result.ages == ()
        assert result.avatars == ()

    def test_uses_base_url(self, clock: FrozenClock) -> None:
        person = _person("1990-01-12", id="p1")
        result = run_derive(
            DeriveInput(people=(person,)), clock=clock, base_url="https://img.test/"
        )
        assert result.avatars == ("https://img.test/p1",)

    def test_logs_each_person_at_debug(
        self, clock: FrozenClock, caplog: pytest.LogCaptureFixture
    ) -> None:
        person = _person("1990-01-12", id="p1")
        with caplog.at_level("DEBUG", logger="src.components.people.component"):
            run_derive(DeriveInput(people=(person,)), clock=clock)

        assert any("p1" in r.getMessage() for r in caplog.records)
