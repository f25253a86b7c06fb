# =============================================================================
# Date resolver: Computus and the conversion of date anchors into concrete
# dates for a liturgical year.
#
# Anchors are resolved within the frame of a liturgical year. Fixed dates and
# "Nth weekday" dates are first looked up in the Gregorian year of the same
# number; when that lands on or after the first Sunday of Advent, the day
# belongs to the next liturgical year and the previous Gregorian year is used
# instead. The Immaculate Conception of liturgical year 2025, for example,
# falls on 2024-12-08.
# =============================================================================

from datetime import date, timedelta
import calendar

import numpy as np

from .errors import InvalidAnchorError
from .models import (FixedDate, NthWeekdayOfMonth, EasterOffset,
                     SeasonBoundaryOffset, SeasonWeekday)

# Oudin's algorithm reproduces the Gregorian Easter tables from the
# Gregorian reform up to 4099.
EASTER_MIN_YEAR = 1583
EASTER_MAX_YEAR = 4099


def easter(year):
    """Return the date of Easter Sunday for Gregorian year `year`.

    This algorithm is based on the algorithm of Oudin (1940) and quoted in
    "Explanatory Supplement to the Astronomical Almanac", P. Kenneth
    Seidelmann, editor.
    """
    if not EASTER_MIN_YEAR <= year <= EASTER_MAX_YEAR:
        raise ValueError(f'Easter can only be computed for years '
                         f'{EASTER_MIN_YEAR} to {EASTER_MAX_YEAR}, not {year}')
    c = year // 100
    n = year - 19 * (year // 19)
    k = (c - 17) // 25
    i = c - c // 4 - (c - k) // 3 + 19 * n + 15
    i = i - 30 * (i // 30)
    i = i - (i // 28) * (1 - (i // 28) * (29 // (i + 1)) * ((21 - n) // 11))

    j = year + year // 4 + i + 2 - c + c // 4
    j = j - 7 * (j // 7)

    l = i - j
    m = 3 + (l + 40) // 44
    d = l + 28 - 31 * (m // 4)
    return date(year, m, d)


def nth_weekday_of_month(year, month, weekday, n):
    """Return the `n`th `weekday` (0=Mon..6=Sun) of `month`, or the last one
    when `n` is -1."""
    # Column `weekday` of the month's calendar, with the zero padding removed
    days = np.array(calendar.monthcalendar(year, month))[:, weekday]
    days = days[days > 0]
    if n == -1:
        return date(year, month, int(days[-1]))
    if n < 1 or n > len(days):
        raise InvalidAnchorError(
            f'{calendar.month_name[month]} {year} has {len(days)} '
            f'{calendar.day_name[weekday]}s, not {n}', year=year)
    return date(year, month, int(days[n - 1]))


def _fixed_date(anchor, year):
    try:
        return date(year, anchor.month, anchor.day)
    except ValueError as e:
        raise InvalidAnchorError(
            f'{anchor.month:02d}-{anchor.day:02d} does not exist in {year}',
            anchor=anchor, year=year) from e


def _calendar_date(anchor, year):
    if isinstance(anchor, FixedDate):
        return _fixed_date(anchor, year)
    try:
        return nth_weekday_of_month(year, anchor.month, anchor.weekday, anchor.n)
    except InvalidAnchorError as e:
        raise InvalidAnchorError(str(e), anchor=anchor, year=year) from e


def _liturgical_calendar_date(anchor, year, seasons):
    try:
        day = _calendar_date(anchor, year)
        error = None
    except InvalidAnchorError as e:
        day, error = None, e
    if day is not None and day <= seasons.end:
        return day

    # Late November and December days may belong to this liturgical year
    # through the previous Gregorian year.
    try:
        previous = _calendar_date(anchor, year - 1)
    except InvalidAnchorError:
        previous = None
    if previous is not None and previous >= seasons.start:
        return previous
    if error is not None:
        raise error
    return day


def resolve(anchor, year, seasons=None):
    """Return the date of `anchor` within liturgical year `year`.

    Arguments
    ---------
    `anchor` : date anchor
        One of `FixedDate`, `NthWeekdayOfMonth`, `EasterOffset`,
        `SeasonBoundaryOffset` or `SeasonWeekday`.
    `year` : int
        Liturgical year, numbered after the Gregorian year of its Easter.
    `seasons` : LiturgicalSeasons
        Seasons of `year`, computed when not passed.

    Returns
    -------
        A `datetime.date`. The date may fall outside the liturgical year (a
        fixed date between the two first Sundays of Advent, a week number the
        season does not reach this year); callers decide whether it occurs.

    Raises
    ------
        `InvalidAnchorError` when the anchor cannot produce a date for the year,
        e.g. February 29 in a common year or a fifth Monday that does not
        exist.
    """
    if seasons is None:
        from .seasons import compute_seasons
        seasons = compute_seasons(year)

    if isinstance(anchor, (FixedDate, NthWeekdayOfMonth)):
        return _liturgical_calendar_date(anchor, year, seasons)
    if isinstance(anchor, EasterOffset):
        return seasons.easter + timedelta(days=anchor.days)
    if isinstance(anchor, SeasonBoundaryOffset):
        return seasons.boundary(anchor.season, anchor.edge) + timedelta(days=anchor.days)
    if isinstance(anchor, SeasonWeekday):
        return seasons.week_day(anchor.season, anchor.week, anchor.weekday)
    raise TypeError(f'Unknown date anchor type: {type(anchor)}')
