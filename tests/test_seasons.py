# tests/test_seasons.py

from datetime import date, timedelta

import pytest

from litcalendar.constants import SeasonKind, SeasonEdge, SUNDAY, SATURDAY, MONDAY, TUESDAY
from litcalendar.seasons import compute_seasons, first_sunday_of_advent, next_sunday


def test_first_sunday_of_advent():
    assert first_sunday_of_advent(2022) == date(2022, 11, 27)
    assert first_sunday_of_advent(2023) == date(2023, 12, 3)
    assert first_sunday_of_advent(2024) == date(2024, 12, 1)
    assert first_sunday_of_advent(2025) == date(2025, 11, 30)


def test_next_sunday_skips_the_given_sunday():
    assert next_sunday(date(2024, 3, 31)) == date(2024, 4, 7)
    assert next_sunday(date(2024, 3, 30)) == date(2024, 3, 31)


def test_key_dates_2024():
    seasons = compute_seasons(2024)
    assert seasons.first_sunday_of_advent == date(2023, 12, 3)
    assert seasons.christmas == date(2023, 12, 25)
    assert seasons.holy_family == date(2023, 12, 31)
    assert seasons.baptism_of_the_lord == date(2024, 1, 7)
    assert seasons.ash_wednesday == date(2024, 2, 14)
    assert seasons.palm_sunday == date(2024, 3, 24)
    assert seasons.easter == date(2024, 3, 31)
    assert seasons.pentecost == date(2024, 5, 19)
    assert seasons.christ_the_king == date(2024, 11, 24)
    assert seasons.start == date(2023, 12, 3)
    assert seasons.end == date(2024, 11, 30)


def test_holy_family_when_christmas_is_a_sunday():
    # Christmas 2022 fell on a Sunday
    seasons = compute_seasons(2023)
    assert seasons.holy_family == date(2022, 12, 30)
    assert seasons.week_day(SeasonKind.CHRISTMASTIDE, 1, SUNDAY) == date(2022, 12, 30)
    assert seasons.week_day(SeasonKind.CHRISTMASTIDE, 1, MONDAY) == date(2022, 12, 26)
    # The second week starts on the Sunday after January 1
    assert seasons.week_day(SeasonKind.CHRISTMASTIDE, 2, SUNDAY) == date(2023, 1, 8)


def test_season_intervals_2024():
    seasons = compute_seasons(2024)
    assert [i.season for i in seasons.intervals] == [
        SeasonKind.ADVENT,
        SeasonKind.CHRISTMASTIDE,
        SeasonKind.ORDINARY_TIME,
        SeasonKind.LENT,
        SeasonKind.HOLY_WEEK,
        SeasonKind.EASTER,
        SeasonKind.ORDINARY_TIME,
    ]
    lent = seasons.intervals_of(SeasonKind.LENT)[0]
    assert (lent.start, lent.end) == (date(2024, 2, 14), date(2024, 3, 27))
    triduum = seasons.intervals_of(SeasonKind.HOLY_WEEK)[0]
    assert (triduum.start, triduum.end) == (date(2024, 3, 28), date(2024, 3, 30))
    assert seasons.boundary(SeasonKind.ORDINARY_TIME, SeasonEdge.START) == date(2024, 1, 8)
    assert seasons.boundary(SeasonKind.ORDINARY_TIME, SeasonEdge.END) == date(2024, 11, 30)


@pytest.mark.parametrize('epiphany_on_sunday', [False, True])
@pytest.mark.parametrize('year', range(1584, 4099, 37))
def test_seasons_partition_the_liturgical_year(year, epiphany_on_sunday):
    seasons = compute_seasons(year, epiphany_on_sunday)
    intervals = seasons.intervals
    assert seasons.start.weekday() == SUNDAY
    assert seasons.end.weekday() == SATURDAY
    assert seasons.end + timedelta(days=1) == compute_seasons(year + 1, epiphany_on_sunday).start
    for interval in intervals:
        assert interval.start <= interval.end
    for previous, following in zip(intervals, intervals[1:]):
        assert previous.end + timedelta(days=1) == following.start
    assert sum(i.days for i in intervals) == (seasons.end - seasons.start).days + 1


def test_season_of():
    seasons = compute_seasons(2024)
    assert seasons.season_of(date(2023, 12, 24)) is SeasonKind.ADVENT
    assert seasons.season_of(date(2024, 1, 7)) is SeasonKind.CHRISTMASTIDE
    assert seasons.season_of(date(2024, 1, 8)) is SeasonKind.ORDINARY_TIME
    assert seasons.season_of(date(2024, 3, 27)) is SeasonKind.LENT
    assert seasons.season_of(date(2024, 3, 29)) is SeasonKind.HOLY_WEEK
    assert seasons.season_of(date(2024, 5, 19)) is SeasonKind.EASTER
    assert seasons.season_of(date(2024, 5, 20)) is SeasonKind.ORDINARY_TIME
    assert seasons.season_of(date(2024, 12, 1)) is None


def test_ordinary_time_weeks_continue_after_pentecost():
    seasons = compute_seasons(2024)
    # Last days before Ash Wednesday are in the sixth week
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 6, SUNDAY) == date(2024, 2, 11)
    # Pentecost Sunday opens the seventh week
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 7, SUNDAY) == date(2024, 5, 19)
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 33, SUNDAY) == date(2024, 11, 17)
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 34, SATURDAY) == date(2024, 11, 30)


def test_week_out_of_range():
    with pytest.raises(ValueError):
        compute_seasons(2024).week_day(SeasonKind.ADVENT, 5, SUNDAY)


def test_epiphany_on_sunday():
    seasons = compute_seasons(2025, epiphany_on_sunday=True)
    assert seasons.epiphany == date(2025, 1, 5)
    assert seasons.baptism_of_the_lord == date(2025, 1, 12)
    assert seasons.week_day(SeasonKind.CHRISTMASTIDE, 2, SUNDAY) == seasons.epiphany
    assert compute_seasons(2025).epiphany == date(2025, 1, 6)


@pytest.mark.parametrize('year, epiphany, baptism', [
    (2023, date(2023, 1, 8), date(2023, 1, 9)),
    (2024, date(2024, 1, 7), date(2024, 1, 8)),
    (2029, date(2029, 1, 7), date(2029, 1, 8)),
])
def test_baptism_on_monday_after_late_epiphany(year, epiphany, baptism):
    seasons = compute_seasons(year, epiphany_on_sunday=True)
    assert seasons.epiphany == epiphany
    assert seasons.baptism_of_the_lord == baptism
    assert baptism.weekday() == MONDAY
    assert seasons.week_day(SeasonKind.CHRISTMASTIDE, 2, SUNDAY) == epiphany
    assert seasons.boundary(SeasonKind.CHRISTMASTIDE, SeasonEdge.END) == baptism
    assert seasons.season_of(baptism) is SeasonKind.CHRISTMASTIDE
    # Ordinary Time opens on the Tuesday of its first week
    tuesday = seasons.week_day(SeasonKind.ORDINARY_TIME, 1, TUESDAY)
    assert tuesday == baptism + timedelta(days=1)
    assert seasons.boundary(SeasonKind.ORDINARY_TIME, SeasonEdge.START) == tuesday
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 1, MONDAY) not in seasons.intervals_of(
        SeasonKind.ORDINARY_TIME)[0]
    assert seasons.week_day(SeasonKind.ORDINARY_TIME, 2, SUNDAY) == epiphany + timedelta(weeks=1)


def test_liturgical_year_is_named_after_its_easter():
    # Advent 2024 opens liturgical year 2025, whose Easter is April 20, 2025
    seasons = compute_seasons(2025)
    assert seasons.start == first_sunday_of_advent(2024) == date(2024, 12, 1)
    assert seasons.easter == date(2025, 4, 20)
    assert seasons.end == first_sunday_of_advent(2025) - timedelta(days=1)
