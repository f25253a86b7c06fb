# tests/test_dates.py

from datetime import date

import pytest
from dateutil.easter import easter as dateutil_easter, EASTER_WESTERN

from litcalendar.constants import SeasonKind, SeasonEdge, MONDAY, THURSDAY, SUNDAY
from litcalendar.dates import easter, nth_weekday_of_month, resolve
from litcalendar.errors import InvalidAnchorError
from litcalendar.models import (FixedDate, NthWeekdayOfMonth, EasterOffset,
                                SeasonBoundaryOffset, SeasonWeekday)

# Published Easter dates, across century boundaries and both extremes of the
# possible range (March 22 and April 25)
GOLDEN_EASTERS = [
    date(1583, 4, 10),
    date(1818, 3, 22),
    date(1900, 4, 15),
    date(1943, 4, 25),
    date(2000, 4, 23),
    date(2008, 3, 23),
    date(2011, 4, 24),
    date(2019, 4, 21),
    date(2024, 3, 31),
    date(2025, 4, 20),
    date(2038, 4, 25),
    date(2285, 3, 22),
]


@pytest.mark.parametrize('expected', GOLDEN_EASTERS, ids=lambda d: str(d.year))
def test_easter_golden_values(expected):
    assert easter(expected.year) == expected


def test_easter_matches_dateutil_over_supported_range():
    for year in range(1583, 4100):
        assert easter(year) == dateutil_easter(year, EASTER_WESTERN), year


def test_easter_is_always_a_sunday_between_march_22_and_april_25():
    for year in range(1583, 4100, 7):
        day = easter(year)
        assert day.weekday() == SUNDAY
        assert date(year, 3, 22) <= day <= date(year, 4, 25)


@pytest.mark.parametrize('year', [1582, 4100])
def test_easter_outside_supported_range(year):
    with pytest.raises(ValueError):
        easter(year)


def test_nth_weekday_of_month():
    # Thanksgiving Day, fourth Thursday of November
    assert nth_weekday_of_month(2024, 11, THURSDAY, 4) == date(2024, 11, 28)
    assert nth_weekday_of_month(2025, 11, THURSDAY, 4) == date(2025, 11, 27)
    # Last Monday of May
    assert nth_weekday_of_month(2024, 5, MONDAY, -1) == date(2024, 5, 27)
    assert nth_weekday_of_month(2024, 1, MONDAY, 5) == date(2024, 1, 29)


def test_nth_weekday_past_the_last_occurrence():
    # February 2024 has four Mondays
    with pytest.raises(InvalidAnchorError):
        nth_weekday_of_month(2024, 2, MONDAY, 5)


def test_fixed_date_in_the_gregorian_year_of_easter():
    assert resolve(FixedDate(1, 16), 2024) == date(2024, 1, 16)
    assert resolve(FixedDate(11, 1), 2024) == date(2024, 11, 1)


def test_fixed_date_after_advent_belongs_to_previous_gregorian_year():
    """The Immaculate Conception of liturgical year 2025 is kept in December
    2024, during the first Advent of that liturgical year."""
    assert resolve(FixedDate(12, 8), 2025) == date(2024, 12, 8)
    assert resolve(FixedDate(12, 25), 2025) == date(2024, 12, 25)


def test_fixed_date_between_two_advents_falls_outside_the_year():
    # Liturgical year 2025 runs from 2024-12-01 to 2025-11-29
    assert resolve(FixedDate(11, 30), 2025) == date(2025, 11, 30)


def test_february_29_is_not_clamped():
    assert resolve(FixedDate(2, 29), 2024) == date(2024, 2, 29)
    with pytest.raises(InvalidAnchorError) as excinfo:
        resolve(FixedDate(2, 29), 2023)
    assert excinfo.value.anchor == FixedDate(2, 29)
    assert excinfo.value.year == 2023


def test_missing_nth_weekday_raises_invalid_anchor():
    with pytest.raises(InvalidAnchorError):
        resolve(NthWeekdayOfMonth(2, MONDAY, 5), 2024)


def test_easter_offsets():
    assert resolve(EasterOffset(0), 2024) == date(2024, 3, 31)
    assert resolve(EasterOffset(-46), 2024) == date(2024, 2, 14)
    assert resolve(EasterOffset(49), 2024) == date(2024, 5, 19)


def test_season_boundary_offsets():
    # Christ the King, the Sunday before Advent 2024
    anchor = SeasonBoundaryOffset(SeasonKind.ORDINARY_TIME, SeasonEdge.END, -6)
    assert resolve(anchor, 2024) == date(2024, 11, 24)
    anchor = SeasonBoundaryOffset(SeasonKind.ADVENT, SeasonEdge.START)
    assert resolve(anchor, 2024) == date(2023, 12, 3)
    anchor = SeasonBoundaryOffset(SeasonKind.CHRISTMASTIDE, SeasonEdge.END)
    assert resolve(anchor, 2024) == date(2024, 1, 7)


def test_season_weekdays():
    assert resolve(SeasonWeekday(SeasonKind.ORDINARY_TIME, 2, SUNDAY), 2024) == date(2024, 1, 14)
    assert resolve(SeasonWeekday(SeasonKind.ORDINARY_TIME, 7, MONDAY), 2024) == date(2024, 5, 20)
    assert resolve(SeasonWeekday(SeasonKind.LENT, 1, SUNDAY), 2024) == date(2024, 2, 18)
    assert resolve(SeasonWeekday(SeasonKind.LENT, 0, THURSDAY), 2024) == date(2024, 2, 15)
    assert resolve(SeasonWeekday(SeasonKind.ADVENT, 2, SUNDAY), 2025) == date(2024, 12, 8)


def test_unknown_anchor_type():
    with pytest.raises(TypeError):
        resolve(date(2024, 1, 1), 2024)
