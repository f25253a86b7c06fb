# =============================================================================
# Calendar configuration.
# =============================================================================

from dataclasses import dataclass
from typing import Optional

from .constants import CalendarScope
from .models import Layer
from .precedence import DEFAULT_RULES, PrecedenceRules
from .data import general_roman, proper_of_time


@dataclass(frozen=True)
class CalendarConfiguration:
    """Inputs of a calendar.

    Arguments
    ---------
    `particular` : Layer
        Optional jurisdiction layer applied over the General Roman Calendar,
        e.g. `litcalendar.data.particular_calendar('united_states')`.
    `scope` : CalendarScope
        Whether a year means January 1 to December 31 (`GREGORIAN`, default)
        or Advent to the eve of the next Advent (`LITURGICAL`).
    `ascension_on_sunday` : bool
        Transfer the Ascension to the Seventh Sunday of Easter.
    `corpus_christi_on_sunday` : bool
        Celebrate Corpus Christi on Sunday (default) instead of Thursday.
    `epiphany_on_sunday` : bool
        Celebrate the Epiphany on the Sunday between January 2 and January 8
        instead of January 6, as in the United States.
    `rules` : PrecedenceRules
        Precedence rule table, unless a layer supplies its own.
    """
    particular: Optional[Layer] = None
    scope: CalendarScope = CalendarScope.GREGORIAN
    ascension_on_sunday: bool = False
    corpus_christi_on_sunday: bool = True
    epiphany_on_sunday: bool = False
    rules: PrecedenceRules = DEFAULT_RULES

    @property
    def layers(self):
        """Calendar sources in merge order."""
        layers = [
            proper_of_time(ascension_on_sunday=self.ascension_on_sunday,
                           corpus_christi_on_sunday=self.corpus_christi_on_sunday,
                           epiphany_on_sunday=self.epiphany_on_sunday),
            general_roman(),
        ]
        if self.particular is not None:
            layers.append(self.particular)
        return tuple(layers)
