# =============================================================================
# Data model of the calendar engine.
#
# A liturgical day is declared once as an `ObservanceDefinition`: a key, a
# precedence rank, one date anchor and the seasons it belongs to. Definitions
# are grouped into `Layer`s (Proper of Time, General Roman calendar, one
# particular calendar) and merged by key. For a given year every definition
# becomes at most one `ResolvedObservance`, and the observances of a year are
# collected in a `YearCalendar`.
# =============================================================================

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Optional, Tuple
import calendar

import pandas as pd

from .constants import (PrecedenceRank, SeasonKind, SeasonEdge, SEASON_WEEKS,
                        WEEKDAY_ABBREVIATIONS)
from .errors import ConfigurationConflictError
from .names import feast_name

# =============================================================================
# Date anchors
# =============================================================================


def _check_month(month):
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise ConfigurationConflictError(f'Invalid month {month!r}')


def _check_weekday(weekday):
    if not isinstance(weekday, int) or not 0 <= weekday <= 6:
        raise ConfigurationConflictError(f'Invalid weekday {weekday!r}')


def _check_season(season):
    if not isinstance(season, SeasonKind):
        raise ConfigurationConflictError(f'Invalid season {season!r}')


@dataclass(frozen=True)
class FixedDate:
    """Same month and day every year, e.g. `FixedDate(12, 25)`."""
    month: int
    day: int

    def validate(self):
        _check_month(self.month)
        # Checked against a leap year: February 29 is a valid declaration and
        # only fails for the years that lack it.
        days_in_month = calendar.monthrange(2000, self.month)[1]
        if not isinstance(self.day, int) or not 1 <= self.day <= days_in_month:
            raise ConfigurationConflictError(
                f'Invalid day {self.day!r} for month {self.month}')


@dataclass(frozen=True)
class NthWeekdayOfMonth:
    """The `n`th `weekday` of `month`; `n=-1` selects the last one."""
    month: int
    weekday: int
    n: int

    def validate(self):
        _check_month(self.month)
        _check_weekday(self.weekday)
        if self.n != -1 and not (isinstance(self.n, int) and 1 <= self.n <= 5):
            raise ConfigurationConflictError(f'Invalid occurrence {self.n!r}')


@dataclass(frozen=True)
class EasterOffset:
    """Number of days before (negative) or after Easter Sunday."""
    days: int

    def validate(self):
        if not isinstance(self.days, int):
            raise ConfigurationConflictError(f'Invalid Easter offset {self.days!r}')


@dataclass(frozen=True)
class SeasonBoundaryOffset:
    """Number of days from the start or the end of a season."""
    season: SeasonKind
    edge: SeasonEdge
    days: int = 0

    def validate(self):
        _check_season(self.season)
        if not isinstance(self.edge, SeasonEdge):
            raise ConfigurationConflictError(f'Invalid season edge {self.edge!r}')
        if not isinstance(self.days, int):
            raise ConfigurationConflictError(f'Invalid season offset {self.days!r}')


@dataclass(frozen=True)
class SeasonWeekday:
    """A weekday of the `week`th liturgical week of a season.

    Liturgical weeks start on Sunday. Ordinary Time keeps counting its weeks
    across both of its periods.
    """
    season: SeasonKind
    week: int
    weekday: int

    def validate(self):
        _check_season(self.season)
        _check_weekday(self.weekday)
        first, last = SEASON_WEEKS[self.season]
        if not isinstance(self.week, int) or not first <= self.week <= last:
            raise ConfigurationConflictError(
                f'Invalid week {self.week!r} for {self.season.value}')


ANCHOR_TYPES = (FixedDate, NthWeekdayOfMonth, EasterOffset,
                SeasonBoundaryOffset, SeasonWeekday)

# =============================================================================
# Definitions and layers
# =============================================================================


@dataclass(frozen=True)
class ObservanceDefinition:
    """Declaration of one liturgical day.

    Arguments
    ---------
    `key` : str
        Identifier, unique within a merged registry. A later layer reuses the
        key to override or drop the definition.
    `precedence` : PrecedenceRank
        Category of the day.
    `anchor` : date anchor
        How the date is found for a given year.
    `seasons` : tuple of SeasonKind
        Seasons the day belongs to. When non-empty, the day only occurs in
        years where its date falls inside one of these seasons.
    `layer`, `replaces` : str
        Filled in by the registry: the layer that supplied the definition and
        the layer whose definition it replaced, if any.
    `metadata` : mapping
        Free data carried along for the layer's own use.
    """
    key: str
    precedence: PrecedenceRank
    anchor: Any
    seasons: Tuple[SeasonKind, ...] = ()
    layer: Optional[str] = None
    replaces: Optional[str] = None
    metadata: Optional[Mapping] = field(default=None, compare=False, hash=False)


@dataclass(frozen=True)
class Drop:
    """Layer entry removing an earlier definition from the merged result."""
    key: str


@dataclass(frozen=True)
class Layer:
    """One calendar source: ordered definitions and drops, plus an optional
    precedence rule table replacing the one inherited from earlier layers."""
    name: str
    entries: Tuple[Any, ...] = ()
    rules: Optional[Any] = None

# =============================================================================
# Resolved observances
# =============================================================================


@dataclass(frozen=True)
class ResolvedObservance:
    definition: ObservanceDefinition
    date: date
    rank: PrecedenceRank
    season: Optional[SeasonKind]
    day_of_week: int
    day_of_season: int
    week_of_season: int
    nth_weekday_in_month: int
    start_of_season: date
    end_of_season: date
    start_of_liturgical_year: date
    end_of_liturgical_year: date
    sunday_cycle: str
    weekday_cycle: str
    commemoration: bool = False

    @property
    def key(self):
        return self.definition.key

    @property
    def precedence(self):
        return self.definition.precedence


class YearCalendar(Mapping):
    """Read-only mapping of each date of a year to its observances.

    The celebrated observance comes first, followed by any commemorations.
    Definitions that could not be resolved for the year are listed in
    `failures` with the reason.
    """

    def __init__(self, year, scope, days, failures=None):
        self._year = year
        self._scope = scope
        self._days = MappingProxyType({d: tuple(obs) for d, obs in sorted(days.items())})
        self._failures = MappingProxyType(dict(failures or {}))

    @property
    def year(self):
        return self._year

    @property
    def scope(self):
        return self._scope

    @property
    def failures(self):
        return self._failures

    def __getitem__(self, day):
        return self._days[day]

    def __iter__(self):
        return iter(self._days)

    def __len__(self):
        return len(self._days)

    def celebration(self, day):
        """Return the celebrated observance of `day`, or None."""
        observances = self._days.get(day)
        return observances[0] if observances else None

    def find(self, key):
        """Return every observance of the year declared under `key`."""
        return [obs for observances in self._days.values()
                for obs in observances if obs.key == key]

    def to_dataframe(self):
        """One row per observance, with the date split the way the CSV export
        expects it."""
        rows = [[obs.date, obs.key, obs.rank.name, obs.rank.rank,
                 obs.season.value if obs.season else '', obs.commemoration]
                for observances in self._days.values() for obs in observances]
        df = pd.DataFrame(rows, columns=['date', 'key', 'rank', 'rank_value',
                                         'season', 'commemoration'])
        df['date'] = pd.to_datetime(df['date'])

        # Split the date into year, month, and day columns
        df['year'] = df.date.dt.year
        df['month'] = df.date.dt.month
        df['day'] = df.date.dt.day
        df['dayofweek'] = df.date.dt.dayofweek
        df['weekday'] = df.dayofweek.map(WEEKDAY_ABBREVIATIONS)
        df['name'] = df['key'].apply(feast_name)

        # Sort columns
        return df[['date', 'weekday', 'key', 'name', 'rank', 'rank_value',
                   'season', 'commemoration', 'year', 'month', 'day',
                   'dayofweek']]

    def __repr__(self):
        return f'YearCalendar(year={self._year}, scope={self._scope.value}, days={len(self._days)})'
