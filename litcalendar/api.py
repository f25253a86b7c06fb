# =============================================================================
# Public operations.
#
# Each configuration object gets one `LiturgicalCalendar`, built on first use
# and kept while the configuration object is alive. The asynchronous variants
# run the same synchronous computation in a worker thread so that an event loop
# is not blocked while a year is assembled.
# =============================================================================

import asyncio
import dataclasses
import threading
import weakref

from .calendar import LiturgicalCalendar
from .config import CalendarConfiguration

DEFAULT_CONFIGURATION = CalendarConfiguration()

# id(configuration) -> (weak reference to configuration, calendar). The entry
# is removed when the configuration is garbage collected, so the calendar holds
# an equal copy rather than the configuration itself.
_calendars = {}
_calendars_lock = threading.RLock()


def get_calendar(configuration=None):
    """Return the `LiturgicalCalendar` of `configuration`, building its
    registry on first use."""
    if configuration is None:
        configuration = DEFAULT_CONFIGURATION
    key = id(configuration)
    entry = _calendars.get(key)
    if entry is None or entry[0]() is not configuration:
        with _calendars_lock:
            entry = _calendars.get(key)
            if entry is None or entry[0]() is not configuration:
                calendar = LiturgicalCalendar(dataclasses.replace(configuration))
                entry = (weakref.ref(configuration), calendar)
                _calendars[key] = entry
                weakref.finalize(configuration, _release, key, entry[0])
    return entry[1]


def _release(key, reference):
    # Reentrant: the collector may run a finalizer while this thread holds the
    # lock in `get_calendar`.
    with _calendars_lock:
        entry = _calendars.get(key)
        if entry is not None and entry[0] is reference:
            del _calendars[key]


def get_definitions(configuration=None):
    """Merged definitions of `configuration`, keyed by observance key."""
    return get_calendar(configuration).registry.definitions


def get_proper_of_time_definitions(configuration=None):
    """Definitions of `configuration` still supplied by the Proper of Time."""
    return get_calendar(configuration).registry.proper_of_time()


def get_seasons(configuration, year):
    """Season intervals and key dates of liturgical year `year`."""
    return get_calendar(configuration).seasons(year)


def generate_calendar(configuration, year):
    """The `YearCalendar` of `year`; the same object on every call."""
    return get_calendar(configuration).generate(year)


def get_one_observance(configuration, key, year):
    """The observance `key` in `year`.

    Raises `UnknownKeyError` if `key` is not defined by `configuration`;
    returns None if it does not occur in `year`.
    """
    return get_calendar(configuration).get_one(key, year)


async def get_definitions_async(configuration=None):
    return await asyncio.to_thread(get_definitions, configuration)


async def get_proper_of_time_definitions_async(configuration=None):
    return await asyncio.to_thread(get_proper_of_time_definitions, configuration)


async def get_seasons_async(configuration, year):
    return await asyncio.to_thread(get_seasons, configuration, year)


async def generate_calendar_async(configuration, year):
    return await asyncio.to_thread(generate_calendar, configuration, year)


async def get_one_observance_async(configuration, key, year):
    return await asyncio.to_thread(get_one_observance, configuration, key, year)
