# tests/test_names.py

import pytest

from litcalendar.names import feast_name, sunday_cycle, weekday_cycle


@pytest.mark.parametrize('year, cycle', [
    (2020, 'A'), (2021, 'B'), (2022, 'C'), (2024, 'B'), (2025, 'C'), (2026, 'A'),
])
def test_sunday_cycle(year, cycle):
    assert sunday_cycle(year) == cycle


def test_weekday_cycle():
    assert weekday_cycle(2024) == 'II'
    assert weekday_cycle(2025) == 'I'


@pytest.mark.parametrize('key, name', [
    ('ordinary_time_8_sunday', 'Eighth Sunday of Ordinary Time'),
    ('advent_2_monday', 'Monday of the Second Week of Advent'),
    ('easter_3_sunday', 'Third Sunday of Easter'),
    ('christmastide_2_sunday', 'Second Sunday of Christmas'),
    ('lent_0_friday', 'Friday After Ash Wednesday'),
    ('joseph_vaz_priest', 'Joseph Vaz Priest'),
    ('all_saints', 'All Saints'),
])
def test_feast_name(key, name):
    assert feast_name(key) == name
