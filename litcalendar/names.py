# =============================================================================
# Lectionary cycles and readable names for liturgical days.
# =============================================================================

import re

from titlecase import titlecase
from num2words import num2words
import numpy as np

SEASON_NAMES = {
    'advent': 'Advent',
    'christmastide': 'Christmas',
    'ordinary_time': 'Ordinary Time',
    'lent': 'Lent',
    'easter': 'Easter',
}

_SEASONAL_DAY = re.compile(
    r'^(?P<season>advent|christmastide|ordinary_time|lent|easter)'
    r'_(?P<week>\d+)_(?P<day>sunday|monday|tuesday|wednesday|thursday|friday|saturday)$')


def sunday_cycle(year):
    """Return the Sunday lectionary cycle ("A", "B" or "C") of liturgical
    year `year`, the year in which its Easter falls."""
    # Pick a starting year for cycle
    A, B, C = 2020, 2021, 2022
    # Array to index
    years = np.array(['A', 'B', 'C'])
    # Subtract the starting years from `year` and divide by 3
    ind = (year-np.array([A, B, C])) % 3 == 0
    # Return the cycle year that is evenly divisible by 3
    return str(years[ind][0])


def weekday_cycle(year):
    """Return the weekday lectionary cycle ("I" or "II") of liturgical year
    `year`: odd years read cycle I, even years cycle II."""
    return 'I' if year % 2 else 'II'


def feast_name(key):
    """Derive the name of the occasion from its `key`.

    Seasonal days such as `ordinary_time_8_sunday` or `advent_2_monday` get a
    numbered name ("Eighth Sunday of Ordinary Time", "Monday of the Second
    Week of Advent"); any other key is converted as-is to a name.
    """
    match = _SEASONAL_DAY.match(key)
    if match is None:
        return titlecase(key.replace('_', ' '))

    season = SEASON_NAMES[match['season']]
    week = int(match['week'])
    day = match['day']
    if week == 0:
        # Days between Ash Wednesday and the First Sunday of Lent
        return titlecase(f'{day} after Ash Wednesday')
    ordinal = num2words(week, ordinal=True)
    if day == 'sunday':
        return titlecase(f'{ordinal} Sunday of {season}')
    return titlecase(f'{day} of the {ordinal} week of {season}')
