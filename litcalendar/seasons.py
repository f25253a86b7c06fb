# =============================================================================
# Season calculator.
#
# A liturgical year is named after the Gregorian year of its Easter. It opens
# on the First Sunday of Advent of the previous Gregorian year and closes on
# the Saturday before the next First Sunday of Advent. The year is divided
# into seven contiguous periods:
#
#   Advent         First Sunday of Advent .. December 24
#   Christmastide  Christmas .. Baptism of the Lord
#   Ordinary Time  day after the Baptism of the Lord .. eve of Ash Wednesday
#   Lent           Ash Wednesday .. Wednesday of Holy Week
#   Holy Week      Holy Thursday .. Holy Saturday (the Triduum)
#   Easter         Easter Sunday .. Pentecost
#   Ordinary Time  Monday after Pentecost .. eve of the next Advent
# =============================================================================

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Tuple

from .constants import SeasonKind, SeasonEdge, SUNDAY, SEASON_WEEKS
from .dates import easter as easter_date


def previous_sunday(from_date):
    """Return the Sunday before `from_date`, not counting `from_date` if
    `from_date` itself is a Sunday."""
    return from_date - timedelta(days=from_date.weekday() + 1)


def next_sunday(from_date):
    """Return the Sunday after `from_date`, not counting `from_date` if
    `from_date` itself is a Sunday."""
    days_ahead = 6 - from_date.weekday()  # 6 is Sunday
    if days_ahead == 0:  # If today is Sunday, get the next one
        days_ahead += 7
    return from_date + timedelta(days=days_ahead)


def first_sunday_of_advent(year):
    """Return the First Sunday of Advent falling in Gregorian year `year`.

    There are always four Sundays in Advent, concluding the Sunday before
    Christmas, regardless of what day of the week Christmas falls. Thus, we
    count back 4 weeks from Christmas; the result is the Sunday nearest to
    November 30.
    """
    return previous_sunday(date(year, 12, 25)) - timedelta(weeks=3)


@dataclass(frozen=True)
class SeasonInterval:
    season: SeasonKind
    start: date
    end: date

    def __contains__(self, day):
        return self.start <= day <= self.end

    @property
    def days(self):
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class LiturgicalSeasons:
    """Season intervals and key dates of one liturgical year."""
    year: int
    intervals: Tuple[SeasonInterval, ...]
    first_sunday_of_advent: date
    christmas: date
    holy_family: date
    epiphany: date
    baptism_of_the_lord: date
    ash_wednesday: date
    palm_sunday: date
    easter: date
    pentecost: date
    christ_the_king: date

    @property
    def start(self):
        return self.intervals[0].start

    @property
    def end(self):
        return self.intervals[-1].end

    def __contains__(self, day):
        return self.start <= day <= self.end

    def intervals_of(self, season):
        return tuple(i for i in self.intervals if i.season is season)

    def boundary(self, season, edge):
        """Return the first day (`SeasonEdge.START`) or the last day
        (`SeasonEdge.END`) of `season`. For Ordinary Time these are the start
        of its first period and the end of its second one."""
        intervals = self.intervals_of(season)
        return intervals[0].start if edge is SeasonEdge.START else intervals[-1].end

    def interval_of(self, day):
        for interval in self.intervals:
            if day in interval:
                return interval
        return None

    def season_of(self, day):
        interval = self.interval_of(day)
        return interval.season if interval else None

    def week_day(self, season, week, weekday):
        """Return the `weekday` of the `week`th liturgical week of `season`.

        Weeks start on Sunday. The returned date is not guaranteed to fall
        inside `season`: the Fourth Saturday of Advent, for example, is
        Christmas Day or later in most years.
        """
        first, last = SEASON_WEEKS[season]
        if not first <= week <= last:
            raise ValueError(f'{season.value} has no week {week}')
        offset = timedelta(days=(weekday + 1) % 7)
        if season is SeasonKind.ADVENT:
            sunday = self.first_sunday_of_advent + timedelta(weeks=week - 1)
        elif season is SeasonKind.CHRISTMASTIDE:
            # When Christmas falls on a Sunday there is no Sunday within the
            # octave, and the Holy Family is celebrated on December 30.
            if week == 1 and weekday == SUNDAY:
                return self.holy_family
            if week == 1:
                # Christmas Day opens the first week when it falls on a Sunday
                sunday = next_sunday(self.christmas - timedelta(days=1))
            else:
                # The second week starts on the Sunday after January 1
                sunday = next_sunday(self.christmas + timedelta(weeks=1))
        elif season is SeasonKind.LENT:
            # Week 0 holds Ash Wednesday and the three days after it.
            sunday = self.ash_wednesday - timedelta(days=3) + timedelta(weeks=week)
        elif season is SeasonKind.HOLY_WEEK:
            sunday = self.palm_sunday
        elif season is SeasonKind.EASTER:
            sunday = self.easter + timedelta(weeks=week - 1)
        else:
            # The Sundays of Ordinary Time advance sequentially from the
            # Baptism of the Lord (or from the Epiphany, when the Baptism is
            # moved to Monday) until Lent. After Pentecost they are counted
            # backwards from Christ the King, always the 34th Sunday, so the
            # first week after Pentecost is not necessarily the one following
            # the last week before Ash Wednesday.
            winter = self.intervals_of(SeasonKind.ORDINARY_TIME)[0]
            first_week = previous_sunday(self.baptism_of_the_lord + timedelta(days=1))
            day = first_week + timedelta(weeks=week - 1) + offset
            if day in winter:
                return day
            sunday = self.christ_the_king - timedelta(weeks=34 - week)
        return sunday + offset


def compute_seasons(year, epiphany_on_sunday=False):
    """Compute the seasons of liturgical year `year`, which opens with Advent
    in Gregorian year `year - 1`.

    With `epiphany_on_sunday`, the Epiphany is celebrated on the Sunday between
    January 2 and January 8. When that Sunday is January 7 or 8, the Baptism of
    the Lord is celebrated on the following Monday.
    """
    advent = first_sunday_of_advent(year - 1)
    christmas = date(year - 1, 12, 25)
    if christmas.weekday() == SUNDAY:
        holy_family = date(year - 1, 12, 30)
    else:
        holy_family = next_sunday(christmas)
    if epiphany_on_sunday:
        epiphany = next_sunday(date(year, 1, 1))
        if epiphany.day >= 7:
            baptism = epiphany + timedelta(days=1)
        else:
            baptism = next_sunday(epiphany)
    else:
        epiphany = date(year, 1, 6)
        baptism = next_sunday(epiphany)

    easter = easter_date(year)
    ash_wednesday = easter - timedelta(days=46)
    palm_sunday = easter - timedelta(days=7)
    holy_thursday = easter - timedelta(days=3)
    pentecost = easter + timedelta(days=49)
    next_advent = first_sunday_of_advent(year)
    christ_the_king = next_advent - timedelta(days=7)

    day = timedelta(days=1)
    intervals = (
        SeasonInterval(SeasonKind.ADVENT, advent, christmas - day),
        SeasonInterval(SeasonKind.CHRISTMASTIDE, christmas, baptism),
        SeasonInterval(SeasonKind.ORDINARY_TIME, baptism + day, ash_wednesday - day),
        SeasonInterval(SeasonKind.LENT, ash_wednesday, holy_thursday - day),
        SeasonInterval(SeasonKind.HOLY_WEEK, holy_thursday, easter - day),
        SeasonInterval(SeasonKind.EASTER, easter, pentecost),
        SeasonInterval(SeasonKind.ORDINARY_TIME, pentecost + day, next_advent - day),
    )
    return LiturgicalSeasons(
        year=year,
        intervals=intervals,
        first_sunday_of_advent=advent,
        christmas=christmas,
        holy_family=holy_family,
        epiphany=epiphany,
        baptism_of_the_lord=baptism,
        ash_wednesday=ash_wednesday,
        palm_sunday=palm_sunday,
        easter=easter,
        pentecost=pentecost,
        christ_the_king=christ_the_king,
    )
