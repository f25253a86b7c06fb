# =============================================================================
# Particular calendar of the United States of America.
#
# Adds the saints and blesseds proper to the dioceses of the United States,
# raises or moves a few General Roman entries, and keeps Thanksgiving Day,
# the fourth Thursday of November.
# =============================================================================

from ..constants import PrecedenceRank as R, THURSDAY
from ..models import ObservanceDefinition, Layer, FixedDate, NthWeekdayOfMonth

UNITED_STATES = 'united_states'


def united_states():
    return Layer(UNITED_STATES, (
        ObservanceDefinition('elizabeth_ann_seton', R.MEMORIAL, FixedDate(1, 4)),
        ObservanceDefinition('john_neumann', R.MEMORIAL, FixedDate(1, 5)),
        ObservanceDefinition('andre_bessette', R.OPT_MEMORIAL, FixedDate(1, 6)),
        ObservanceDefinition('katharine_drexel', R.OPT_MEMORIAL, FixedDate(3, 3)),
        ObservanceDefinition('damien_de_veuster', R.OPT_MEMORIAL, FixedDate(5, 10)),
        ObservanceDefinition('isidore_the_farmer', R.OPT_MEMORIAL, FixedDate(5, 15)),
        ObservanceDefinition('junipero_serra', R.OPT_MEMORIAL, FixedDate(7, 1)),
        ObservanceDefinition('kateri_tekakwitha', R.MEMORIAL, FixedDate(7, 14)),
        # Moved to make room for Saint Kateri Tekakwitha
        ObservanceDefinition('camillus_de_lellis', R.OPT_MEMORIAL, FixedDate(7, 18)),
        ObservanceDefinition('peter_claver', R.MEMORIAL, FixedDate(9, 9)),
        ObservanceDefinition('frances_xavier_cabrini', R.MEMORIAL, FixedDate(11, 13)),
        ObservanceDefinition('our_lady_of_guadalupe', R.FEAST, FixedDate(12, 12)),
        ObservanceDefinition('thanksgiving_day', R.OPT_MEMORIAL,
                             NthWeekdayOfMonth(11, THURSDAY, 4)),
    ))
