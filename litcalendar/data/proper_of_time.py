# =============================================================================
# Proper of Time: the Sundays, weekdays and feasts of the Lord that follow the
# liturgical seasons rather than the civil calendar.
# =============================================================================

from ..constants import (PrecedenceRank as R, SeasonKind, SeasonEdge,
                         SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY,
                         SATURDAY)
from ..models import (ObservanceDefinition, Layer, FixedDate, EasterOffset,
                      SeasonBoundaryOffset, SeasonWeekday)

PROPER_OF_TIME = 'proper_of_time'

ADVENT = (SeasonKind.ADVENT,)
CHRISTMASTIDE = (SeasonKind.CHRISTMASTIDE,)
ORDINARY_TIME = (SeasonKind.ORDINARY_TIME,)
LENT = (SeasonKind.LENT,)
HOLY_WEEK = (SeasonKind.HOLY_WEEK,)
EASTER = (SeasonKind.EASTER,)

# Liturgical weeks run from Sunday to Saturday
WEEK = (
    ('sunday', SUNDAY),
    ('monday', MONDAY),
    ('tuesday', TUESDAY),
    ('wednesday', WEDNESDAY),
    ('thursday', THURSDAY),
    ('friday', FRIDAY),
    ('saturday', SATURDAY),
)


def _week(prefix, season, week, sunday, weekday, days=WEEK):
    """Definitions for the days of one liturgical week, keyed
    `{prefix}_{week}_{day}`. Pass `sunday=None` to leave the Sunday out."""
    definitions = []
    for name, day in days:
        precedence = sunday if day == SUNDAY else weekday
        if precedence is None:
            continue
        definitions.append(ObservanceDefinition(
            f'{prefix}_{week}_{name}', precedence,
            SeasonWeekday(season, week, day), (season,)))
    return definitions


def _advent():
    entries = []
    for week in range(1, 5):
        entries += _week('advent', SeasonKind.ADVENT, week,
                         R.SUNDAY_OF_ADVENT, R.WEEKDAY_OF_ADVENT)
    # December 17 to 24 take precedence over the weekdays they fall on
    for day in range(17, 25):
        entries.append(ObservanceDefinition(
            f'advent_december_{day}', R.WEEKDAY_FEAST, FixedDate(12, day), ADVENT))
    return entries


def _christmastide(epiphany_on_sunday):
    entries = [
        ObservanceDefinition('christmas', R.SOLEMNITY, FixedDate(12, 25), CHRISTMASTIDE),
        # Sunday within the octave of Christmas, or December 30
        ObservanceDefinition('holy_family', R.FEAST_OF_THE_LORD,
                             SeasonWeekday(SeasonKind.CHRISTMASTIDE, 1, SUNDAY),
                             CHRISTMASTIDE),
    ]
    for n, day in enumerate(range(26, 32), start=2):
        entries.append(ObservanceDefinition(
            f'christmas_octave_day_{n}', R.WEEKDAY_FEAST, FixedDate(12, day),
            CHRISTMASTIDE))
    entries.append(ObservanceDefinition('mary_mother_of_god', R.SOLEMNITY,
                                        FixedDate(1, 1), CHRISTMASTIDE))
    second_sunday = SeasonWeekday(SeasonKind.CHRISTMASTIDE, 2, SUNDAY)
    if epiphany_on_sunday:
        # The Epiphany replaces the Second Sunday of Christmas, and January 6
        # becomes an ordinary weekday of Christmastide
        entries.append(ObservanceDefinition('epiphany', R.SOLEMNITY, second_sunday,
                                            CHRISTMASTIDE))
    else:
        entries += [
            ObservanceDefinition('christmastide_2_sunday', R.SUNDAY, second_sunday,
                                 CHRISTMASTIDE),
            ObservanceDefinition('epiphany', R.SOLEMNITY, FixedDate(1, 6), CHRISTMASTIDE),
        ]
    for day in range(2, 13):
        if day == 6 and not epiphany_on_sunday:
            continue
        entries.append(ObservanceDefinition(
            f'christmastide_january_{day}', R.WEEKDAY_OF_CHRISTMASTIDE,
            FixedDate(1, day), CHRISTMASTIDE))
    entries.append(ObservanceDefinition(
        'baptism_of_the_lord', R.FEAST_OF_THE_LORD,
        SeasonBoundaryOffset(SeasonKind.CHRISTMASTIDE, SeasonEdge.END), CHRISTMASTIDE))
    return entries


def _lent():
    entries = [
        ObservanceDefinition('ash_wednesday', R.PRIVILEGED_WEEKDAY, EasterOffset(-46), LENT),
    ]
    entries += _week('lent', SeasonKind.LENT, 0, None, R.WEEKDAY_OF_LENT,
                     days=WEEK[4:])
    for week in range(1, 6):
        entries += _week('lent', SeasonKind.LENT, week,
                         R.SUNDAY_OF_LENT, R.WEEKDAY_OF_LENT)
    entries += [
        ObservanceDefinition('palm_sunday', R.SUNDAY_OF_LENT, EasterOffset(-7), LENT),
        ObservanceDefinition('holy_monday', R.HOLY_WEEK, EasterOffset(-6), LENT),
        ObservanceDefinition('holy_tuesday', R.HOLY_WEEK, EasterOffset(-5), LENT),
        ObservanceDefinition('holy_wednesday', R.HOLY_WEEK, EasterOffset(-4), LENT),
        ObservanceDefinition('holy_thursday', R.TRIDUUM, EasterOffset(-3), HOLY_WEEK),
        ObservanceDefinition('good_friday', R.TRIDUUM, EasterOffset(-2), HOLY_WEEK),
        ObservanceDefinition('holy_saturday', R.TRIDUUM, EasterOffset(-1), HOLY_WEEK),
    ]
    return entries


def _eastertide(ascension_on_sunday):
    entries = [
        ObservanceDefinition('easter_sunday', R.SUNDAY_OF_EASTER, EasterOffset(0), EASTER),
    ]
    # Weekdays within the octave of Easter
    entries += _week('easter', SeasonKind.EASTER, 1, None, R.PRIVILEGED_WEEKDAY)
    for week in range(2, 8):
        # The Ascension replaces the Seventh Sunday of Easter where it is
        # transferred to Sunday
        sunday = None if ascension_on_sunday and week == 7 else R.SUNDAY_OF_EASTER
        entries += _week('easter', SeasonKind.EASTER, week, sunday, R.WEEKDAY_OF_EASTER)
    # Ascension is celebrated 40 days after Easter (inclusive)
    ascension = EasterOffset(42 if ascension_on_sunday else 39)
    entries += [
        ObservanceDefinition('ascension', R.SOLEMNITY, ascension, EASTER),
        ObservanceDefinition('pentecost_sunday', R.SUNDAY_OF_EASTER, EasterOffset(49), EASTER),
    ]
    return entries


def _ordinary_time(corpus_christi_on_sunday):
    entries = []
    for week in range(1, 35):
        # The Baptism of the Lord takes the Sunday of the first week and Christ
        # the King the Sunday of the last one
        sunday = None if week in (1, 34) else R.SUNDAY
        entries += _week('ordinary_time', SeasonKind.ORDINARY_TIME, week,
                         sunday, R.WEEKDAY)
    corpus_christi = EasterOffset(63 if corpus_christi_on_sunday else 60)
    entries += [
        ObservanceDefinition('trinity_sunday', R.SOLEMNITY, EasterOffset(56), ORDINARY_TIME),
        ObservanceDefinition('corpus_christi', R.SOLEMNITY, corpus_christi, ORDINARY_TIME),
        ObservanceDefinition('sacred_heart', R.SOLEMNITY, EasterOffset(68), ORDINARY_TIME),
        ObservanceDefinition('christ_the_king', R.SOLEMNITY,
                             SeasonBoundaryOffset(SeasonKind.ORDINARY_TIME, SeasonEdge.END, -6),
                             ORDINARY_TIME),
    ]
    return entries


def proper_of_time(ascension_on_sunday=False, corpus_christi_on_sunday=True,
                   epiphany_on_sunday=False):
    """Build the Proper of Time layer.

    Arguments
    ---------
    `ascension_on_sunday` : bool
        Transfer the Ascension from Thursday (Easter + 39) to the Seventh
        Sunday of Easter (Easter + 42).
    `corpus_christi_on_sunday` : bool
        Celebrate Corpus Christi on the Sunday after Trinity Sunday rather
        than on the Thursday before it.
    `epiphany_on_sunday` : bool
        Celebrate the Epiphany on the Sunday between January 2 and January 8
        in place of the Second Sunday of Christmas. Must match the seasons the
        layer is resolved against.
    """
    entries = (_advent()
               + _christmastide(epiphany_on_sunday)
               + _ordinary_time(corpus_christi_on_sunday)
               + _lent()
               + _eastertide(ascension_on_sunday))
    return Layer(PROPER_OF_TIME, tuple(entries))
