# =============================================================================
# Particular calendar of Sri Lanka.
# =============================================================================

from ..constants import PrecedenceRank as R
from ..models import ObservanceDefinition, Layer, FixedDate

SRI_LANKA = 'sri_lanka'


def sri_lanka():
    return Layer(SRI_LANKA, (
        ObservanceDefinition('joseph_vaz_priest', R.OPT_MEMORIAL, FixedDate(1, 16)),
        ObservanceDefinition('our_lady_of_lanka', R.FEAST, FixedDate(2, 4)),
        ObservanceDefinition('our_lady_of_madhu', R.FEAST, FixedDate(7, 2)),
    ))
