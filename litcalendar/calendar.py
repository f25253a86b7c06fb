# =============================================================================
# Calendar assembler.
#
# For a requested year the assembler resolves the date of every registered
# definition within each liturgical year overlapping the requested frame,
# groups the candidates by date, runs the precedence resolver on every group
# and attaches the season metadata of the day. Seasons and year calendars are
# computed at most once per year and cached for the lifetime of the instance.
# =============================================================================

from datetime import date
import logging
import threading

import pandas as pd

from .config import CalendarConfiguration
from .constants import CalendarScope
from .dates import resolve, EASTER_MIN_YEAR, EASTER_MAX_YEAR
from .errors import InvalidAnchorError
from .models import ResolvedObservance, YearCalendar
from .names import sunday_cycle, weekday_cycle
from .precedence import resolve as resolve_precedence
from .registry import build_registry
from .seasons import compute_seasons

logger = logging.getLogger(__name__)

# A Gregorian year overlaps two liturgical years, and both need an Easter
MIN_YEAR = EASTER_MIN_YEAR + 1
MAX_YEAR = EASTER_MAX_YEAR - 1


class LiturgicalCalendar:
    """Calendar of one configuration, with its per-year caches."""

    def __init__(self, configuration=None):
        self._configuration = configuration or CalendarConfiguration()
        self._registry = build_registry(self._configuration)
        self._seasons = {}
        self._years = {}
        self._guard = threading.Lock()
        self._locks = {}

    @property
    def configuration(self):
        return self._configuration

    @property
    def registry(self):
        return self._registry

    @property
    def scope(self):
        return self._configuration.scope

    # -------------------------------------------------------------------------
    # Caching
    # -------------------------------------------------------------------------

    def _lock(self, name, year):
        with self._guard:
            return self._locks.setdefault((name, year), threading.Lock())

    def _cached(self, name, cache, year, compute):
        """Return `cache[year]`, computing it first if needed. Concurrent first
        requests for the same year compute it once."""
        try:
            value = cache[year]
        except KeyError:
            pass
        else:
            logger.debug('%s %d: cache hit', name, year)
            return value
        with self._lock(name, year):
            if year not in cache:
                cache[year] = compute(year)
            return cache[year]

    @staticmethod
    def _check_year(year, first=MIN_YEAR, last=MAX_YEAR):
        if not isinstance(year, int) or isinstance(year, bool):
            raise TypeError(f'year must be an integer, not {year!r}')
        if not first <= year <= last:
            raise ValueError(f'year must be between {first} and {last}, not {year}')

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def seasons(self, year):
        """Return the `LiturgicalSeasons` of liturgical year `year`."""
        self._check_year(year, EASTER_MIN_YEAR, EASTER_MAX_YEAR)
        return self._cached('seasons', self._seasons, year, self._compute_seasons)

    def _compute_seasons(self, year):
        return compute_seasons(year, epiphany_on_sunday=self._configuration.epiphany_on_sunday)

    def generate(self, year):
        """Return the `YearCalendar` of `year` within the configured scope.

        Repeated calls return the same object.
        """
        self._check_year(year)
        return self._cached('calendar', self._years, year, self._generate)

    def get_one(self, key, year):
        """Resolve the observance `key` in `year`, without precedence.

        Raises `UnknownKeyError` if `key` is not a registered definition.
        Returns None if the definition does not occur in `year`.
        """
        self._check_year(year)
        definition = self._registry.get(key)
        for seasons, start, end in self._frames(year):
            try:
                day = resolve(definition.anchor, seasons.year, seasons)
            except InvalidAnchorError as e:
                logger.debug('%s: %s', key, e)
                continue
            if start <= day <= end and self._in_seasons(definition, day, seasons):
                return self._observance(definition, day, seasons)
        return None

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    def _frames(self, year):
        """Seasons of each liturgical year overlapping `year`, with the part of
        it that lies within the configured scope."""
        if self.scope is CalendarScope.LITURGICAL:
            seasons = self.seasons(year)
            return [(seasons, seasons.start, seasons.end)]
        first, last = date(year, 1, 1), date(year, 12, 31)
        frames = []
        for liturgical_year in (year, year + 1):
            seasons = self.seasons(liturgical_year)
            start, end = max(seasons.start, first), min(seasons.end, last)
            if start <= end:
                frames.append((seasons, start, end))
        return frames

    @staticmethod
    def _in_seasons(definition, day, seasons):
        return not definition.seasons or seasons.season_of(day) in definition.seasons

    @staticmethod
    def _observance(definition, day, seasons):
        interval = seasons.interval_of(day)
        day_of_season = (day - interval.start).days + 1
        return ResolvedObservance(
            definition=definition,
            date=day,
            rank=definition.precedence,
            season=interval.season,
            day_of_week=day.weekday(),
            day_of_season=day_of_season,
            week_of_season=day_of_season // 7,
            nth_weekday_in_month=(day.day - 1) // 7 + 1,
            start_of_season=interval.start,
            end_of_season=interval.end,
            start_of_liturgical_year=seasons.start,
            end_of_liturgical_year=seasons.end,
            sunday_cycle=sunday_cycle(seasons.year),
            weekday_cycle=weekday_cycle(seasons.year),
        )

    def _generate(self, year):
        rows = []
        errors = {}
        placed = set()
        for seasons, start, end in self._frames(year):
            for key, definition in self._registry.definitions.items():
                try:
                    day = resolve(definition.anchor, seasons.year, seasons)
                except InvalidAnchorError as e:
                    errors.setdefault(key, str(e))
                    continue
                if not start <= day <= end:
                    continue
                if not self._in_seasons(definition, day, seasons):
                    logger.debug('%s: %s falls outside %s', key, day,
                                 ', '.join(s.value for s in definition.seasons))
                    continue
                placed.add(key)
                rows.append([day, key, self._observance(definition, day, seasons)])

        # A definition only fails if no liturgical year of the frame could
        # place it
        failures = {key: message for key, message in errors.items() if key not in placed}
        for key, message in failures.items():
            logger.debug('Skipping %s in %d: %s', key, year, message)

        df = pd.DataFrame(rows, columns=['date', 'key', 'observance'])
        days = {}
        for day, group in df.groupby('date', sort=True):
            resolution = resolve_precedence(list(group['observance']), self._registry)
            days[day] = resolution.observances

        logger.info('Generated %s calendar for %d: %d days, %d failures',
                    self.scope.value, year, len(days), len(failures))
        return YearCalendar(year, self.scope, days, failures)

    def __repr__(self):
        return f'LiturgicalCalendar({self._registry!r}, scope={self.scope.value})'
