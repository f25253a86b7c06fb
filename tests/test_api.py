# tests/test_api.py

import asyncio
from datetime import date
import gc
import weakref

import pytest

import litcalendar
from litcalendar import (CalendarConfiguration, UnknownKeyError, PrecedenceRank,
                         get_calendar, get_definitions, get_proper_of_time_definitions,
                         get_seasons, generate_calendar, get_one_observance,
                         get_definitions_async, get_seasons_async,
                         generate_calendar_async, get_one_observance_async)
from litcalendar.data import particular_calendar

SRI_LANKA = CalendarConfiguration(particular=particular_calendar('sri_lanka'))


def test_base_and_general_layers_2024():
    assert get_one_observance(None, 'easter_sunday', 2024).date == date(2024, 3, 31)
    assert get_one_observance(None, 'ash_wednesday', 2024).date == date(2024, 2, 14)
    assert get_one_observance(None, 'pentecost_sunday', 2024).date == date(2024, 5, 19)


def test_jurisdiction_definition():
    observance = get_one_observance(SRI_LANKA, 'joseph_vaz_priest', 2024)
    assert observance.date == date(2024, 1, 16)
    assert observance.rank is PrecedenceRank.OPT_MEMORIAL
    assert observance.definition.layer == 'sri_lanka'


def test_key_of_inactive_jurisdiction_is_unknown():
    with pytest.raises(UnknownKeyError) as excinfo:
        get_one_observance(CalendarConfiguration(), 'joseph_vaz_priest', 2024)
    assert excinfo.value.key == 'joseph_vaz_priest'
    assert isinstance(excinfo.value, KeyError)


def test_not_occurring_is_none():
    assert get_one_observance(None, 'christmastide_january_12', 2024) is None


def test_one_calendar_per_configuration():
    assert get_calendar(SRI_LANKA) is get_calendar(SRI_LANKA)
    assert get_calendar() is get_calendar(litcalendar.api.DEFAULT_CONFIGURATION)
    # Equal but distinct configurations get their own calendar
    assert get_calendar(CalendarConfiguration()) is not get_calendar(SRI_LANKA)


def test_generate_calendar_is_cached():
    assert generate_calendar(SRI_LANKA, 2024) is generate_calendar(SRI_LANKA, 2024)
    assert generate_calendar(SRI_LANKA, 2024) is not generate_calendar(SRI_LANKA, 2025)


def test_definitions():
    definitions = get_definitions(SRI_LANKA)
    assert definitions['joseph_vaz_priest'].precedence is PrecedenceRank.OPT_MEMORIAL
    assert 'easter_sunday' in definitions
    proper = get_proper_of_time_definitions(SRI_LANKA)
    assert 'easter_sunday' in proper
    assert 'joseph_vaz_priest' not in proper


def test_get_seasons():
    seasons = get_seasons(None, 2024)
    assert seasons.easter == date(2024, 3, 31)
    assert seasons.first_sunday_of_advent == date(2023, 12, 3)


def test_async_wrappers():
    async def run():
        return await asyncio.gather(
            generate_calendar_async(SRI_LANKA, 2024),
            get_one_observance_async(SRI_LANKA, 'our_lady_of_lanka', 2024),
            get_seasons_async(SRI_LANKA, 2024),
            get_definitions_async(SRI_LANKA),
        )

    calendar, lanka, seasons, definitions = asyncio.run(run())
    assert calendar is generate_calendar(SRI_LANKA, 2024)
    assert lanka.date == date(2024, 2, 4)
    assert seasons.pentecost == date(2024, 5, 19)
    assert definitions is get_definitions(SRI_LANKA)


def test_async_unknown_key():
    with pytest.raises(UnknownKeyError):
        asyncio.run(get_one_observance_async(None, 'no_such_saint', 2024))


def test_calendar_is_released_with_its_configuration():
    configuration = CalendarConfiguration(particular=particular_calendar('sri_lanka'))
    key = id(configuration)
    calendar = weakref.ref(get_calendar(configuration))
    generate_calendar(configuration, 2024)
    assert key in litcalendar.api._calendars
    assert calendar().configuration == configuration

    del configuration
    gc.collect()
    assert key not in litcalendar.api._calendars
    assert calendar() is None


def test_default_configuration_stays_cached():
    calendar = get_calendar()
    gc.collect()
    assert get_calendar() is calendar
