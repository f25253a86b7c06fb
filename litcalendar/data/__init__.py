"""Static calendar layers: the Proper of Time, the General Roman Calendar and
the particular calendars of a few jurisdictions."""

from .proper_of_time import PROPER_OF_TIME, proper_of_time
from .general_roman import GENERAL_ROMAN, general_roman
from .sri_lanka import SRI_LANKA, sri_lanka
from .united_states import UNITED_STATES, united_states

PARTICULAR_CALENDARS = {
    SRI_LANKA: sri_lanka,
    UNITED_STATES: united_states,
}


def particular_calendar(name):
    """Return the layer of the particular calendar `name`, e.g. "sri_lanka".

    Raises `KeyError` if no particular calendar is registered under `name`.
    """
    try:
        build = PARTICULAR_CALENDARS[name]
    except KeyError:
        raise KeyError(f'Unknown particular calendar {name!r}; choose from '
                       f'{", ".join(sorted(PARTICULAR_CALENDARS))}') from None
    return build()
