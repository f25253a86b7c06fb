# =============================================================================
# Enumerations shared by every part of the calendar engine: precedence ranks,
# liturgical seasons, season edges and the calendar scope.
# =============================================================================

from enum import Enum
import calendar

# Weekday numbers follow Python's `calendar` module: Monday is 0, Sunday is 6.
MONDAY = calendar.MONDAY
TUESDAY = calendar.TUESDAY
WEDNESDAY = calendar.WEDNESDAY
THURSDAY = calendar.THURSDAY
FRIDAY = calendar.FRIDAY
SATURDAY = calendar.SATURDAY
SUNDAY = calendar.SUNDAY

WEEKDAY_ABBREVIATIONS = {
    0: 'Mon',
    1: 'Tues',
    2: 'Wed',
    3: 'Thurs',
    4: 'Fri',
    5: 'Sat',
    6: 'Sun'
}


class PrecedenceRank(Enum):
    """Category of a liturgical day, ordered by its numeric `rank`.

    Members sharing a `rank` tie. Members with `displaceable=False` can never
    be replaced by another observance, whatever its rank: the Sundays of
    Advent, Lent and Easter, the days of Holy Week, Ash Wednesday and the
    Triduum.
    """

    SOLEMNITY = ('SOLEMNITY', 'Solemnity', 12, True)
    SUNDAY_OF_EASTER = ('SUNDAY_OF_EASTER', 'Sunday', 11, False)
    SUNDAY_OF_LENT = ('SUNDAY_OF_LENT', 'Sunday', 11, False)
    SUNDAY_OF_ADVENT = ('SUNDAY_OF_ADVENT', 'Sunday', 11, False)
    FEAST_OF_THE_LORD = ('FEAST_OF_THE_LORD', 'Feast', 10, True)
    # A feast that can replace a Sunday
    FIXED_FEAST = ('FIXED_FEAST', 'Feast', 10, True)
    SUNDAY = ('SUNDAY', 'Sunday', 9, True)
    # Monday, Tuesday and Wednesday of Holy Week
    HOLY_WEEK = ('HOLY_WEEK', 'Holy Week', 8, False)
    # Ash Wednesday and the weekdays within the octave of Easter
    PRIVILEGED_WEEKDAY = ('PRIVILEGED_WEEKDAY', 'Weekday', 8, False)
    # Takes precedence over weekdays (and Saturdays) but not Sundays
    FEAST = ('FEAST', 'Feast', 7, True)
    FEAST_APOSTLE = ('FEAST_APOSTLE', 'Feast', 7, True)
    FEAST_MARTYR = ('FEAST_MARTYR', 'Feast', 7, True)
    # Special weekdays which take precedence over memorials
    WEEKDAY_FEAST = ('WEEKDAY_FEAST', 'Weekday', 7, True)
    # Thursday, Friday and Saturday of Holy Week
    TRIDUUM = ('TRIDUUM', 'Triduum', 6, False)
    MEMORIAL = ('MEMORIAL', 'Memorial', 5, True)
    MEMORIAL_MARTYR = ('MEMORIAL_MARTYR', 'Memorial', 5, True)
    OPT_MEMORIAL = ('OPT_MEMORIAL', 'Optional Memorial', 4, True)
    OPT_MEMORIAL_MARTYR = ('OPT_MEMORIAL_MARTYR', 'Optional Memorial', 4, True)
    # A memorial reduced to a commemoration
    COMMEMORATION = ('COMMEMORATION', 'Commemoration', 3, True)
    WEEKDAY_OF_EASTER = ('WEEKDAY_OF_EASTER', 'Weekday', 2, True)
    WEEKDAY_OF_LENT = ('WEEKDAY_OF_LENT', 'Weekday', 1, True)
    WEEKDAY_OF_ADVENT = ('WEEKDAY_OF_ADVENT', 'Weekday', 1, True)
    WEEKDAY = ('WEEKDAY', 'Weekday', 0, True)
    WEEKDAY_OF_CHRISTMASTIDE = ('WEEKDAY_OF_CHRISTMASTIDE', 'Weekday', 0, True)

    def __init__(self, code, label, rank, displaceable):
        self.label = label
        self.rank = rank
        self.displaceable = displaceable

    def __lt__(self, other):
        if not isinstance(other, PrecedenceRank):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, PrecedenceRank):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, PrecedenceRank):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, PrecedenceRank):
            return NotImplemented
        return self.rank >= other.rank


class SeasonKind(Enum):
    ADVENT = 'advent'
    CHRISTMASTIDE = 'christmastide'
    ORDINARY_TIME = 'ordinary-time'
    LENT = 'lent'
    HOLY_WEEK = 'holy-week'
    EASTER = 'easter'


class SeasonEdge(Enum):
    START = 'start'
    END = 'end'


class CalendarScope(Enum):
    """Framing of the year passed to the calendar.

    `GREGORIAN` covers January 1 to December 31. `LITURGICAL` covers the
    liturgical year that opens with Advent in the preceding Gregorian year.
    """

    GREGORIAN = 'gregorian'
    LITURGICAL = 'liturgical'


# Range of liturgical week numbers each season can hold. Lent opens with week
# 0, the four days from Ash Wednesday to the following Saturday.
SEASON_WEEKS = {
    SeasonKind.ADVENT: (1, 4),
    SeasonKind.CHRISTMASTIDE: (1, 2),
    SeasonKind.ORDINARY_TIME: (1, 34),
    SeasonKind.LENT: (0, 6),
    SeasonKind.HOLY_WEEK: (1, 1),
    SeasonKind.EASTER: (1, 8),
}
