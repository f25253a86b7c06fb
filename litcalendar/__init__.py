"""Catholic liturgical calendars: moveable feasts, seasons and the precedence
of the observances sharing a day, for the General Roman Calendar and a few
particular calendars."""

from .constants import (PrecedenceRank, SeasonKind, SeasonEdge, CalendarScope,
                        MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY,
                        SUNDAY)
from .errors import (LiturgicalCalendarError, InvalidAnchorError,
                     UnknownKeyError, ConfigurationConflictError)
from .models import (FixedDate, NthWeekdayOfMonth, EasterOffset,
                     SeasonBoundaryOffset, SeasonWeekday, ObservanceDefinition,
                     Drop, Layer, ResolvedObservance, YearCalendar)
from .dates import easter
from .seasons import LiturgicalSeasons, SeasonInterval, compute_seasons
from .precedence import PrecedenceRules, DEFAULT_RULES, Resolution
from .registry import DefinitionRegistry, merge_layers, build_registry
from .config import CalendarConfiguration
from .calendar import LiturgicalCalendar
from .api import (get_calendar, get_definitions, get_proper_of_time_definitions,
                  get_seasons, generate_calendar, get_one_observance,
                  get_definitions_async, get_proper_of_time_definitions_async,
                  get_seasons_async, generate_calendar_async,
                  get_one_observance_async)

__version__ = '1.0.0'
