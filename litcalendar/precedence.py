# =============================================================================
# Precedence resolver: pick the celebrated observance among the candidates
# sharing one date, and decide which of the others survive as commemorations.
# =============================================================================

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .constants import PrecedenceRank
from .errors import ConfigurationConflictError
from .models import ResolvedObservance

MEMORIALS = frozenset([
    PrecedenceRank.MEMORIAL,
    PrecedenceRank.MEMORIAL_MARTYR,
    PrecedenceRank.OPT_MEMORIAL,
    PrecedenceRank.OPT_MEMORIAL_MARTYR,
])


def _ranks(ranks):
    return frozenset(ranks)


def _rank_table(table):
    return MappingProxyType({rank: frozenset(ranks) for rank, ranks in table.items()})


@dataclass(frozen=True)
class PrecedenceRules:
    """Rule table of the precedence resolver.

    Arguments
    ---------
    `commemorable` : set of PrecedenceRank
        Ranks that may be kept as a commemoration when outranked.
    `forbids_commemoration` : set of PrecedenceRank
        Winning ranks that allow no commemoration on their day.
    `coexist_with_fixed` : mapping PrecedenceRank -> set of PrecedenceRank
        For a non-displaceable winning rank, the displaced ranks kept as
        commemorations instead of being suppressed.
    `privileged_over` : mapping PrecedenceRank -> set of PrecedenceRank
        For a displaceable weekday rank, the higher ranks it still takes
        precedence over. Those are reduced to commemorations.
    """
    commemorable: FrozenSet[PrecedenceRank] = frozenset()
    forbids_commemoration: FrozenSet[PrecedenceRank] = frozenset()
    coexist_with_fixed: Mapping[PrecedenceRank, FrozenSet[PrecedenceRank]] = \
        field(default_factory=dict)
    privileged_over: Mapping[PrecedenceRank, FrozenSet[PrecedenceRank]] = \
        field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'commemorable', _ranks(self.commemorable))
        object.__setattr__(self, 'forbids_commemoration',
                           _ranks(self.forbids_commemoration))
        object.__setattr__(self, 'coexist_with_fixed',
                           _rank_table(self.coexist_with_fixed))
        object.__setattr__(self, 'privileged_over',
                           _rank_table(self.privileged_over))

    def validate(self, layer=None):
        """Raise `ConfigurationConflictError` if the table contradicts itself
        or the displaceability of the ranks it names."""
        def conflict(message):
            return ConfigurationConflictError(message, layer=layer)

        for ranks in (self.commemorable, self.forbids_commemoration,
                      *self.coexist_with_fixed.values(),
                      *self.privileged_over.values(),
                      self.coexist_with_fixed.keys(),
                      self.privileged_over.keys()):
            for rank in ranks:
                if not isinstance(rank, PrecedenceRank):
                    raise conflict(f'Not a precedence rank: {rank!r}')

        for rank, displaced in self.coexist_with_fixed.items():
            if rank.displaceable:
                raise conflict(f'{rank.name} can be displaced and cannot keep '
                               f'commemorations of what it displaces')
            if displaced and rank in self.forbids_commemoration:
                raise conflict(f'{rank.name} both forbids and keeps commemorations')

        for rank, outranked in self.privileged_over.items():
            if not rank.displaceable:
                raise conflict(f'{rank.name} cannot be displaced and needs no privilege')
            for other in outranked:
                if not other.displaceable:
                    raise conflict(f'{rank.name} cannot take precedence over '
                                   f'{other.name}, which cannot be displaced')
                if other not in self.commemorable:
                    raise conflict(f'{rank.name} takes precedence over {other.name}, '
                                   f'which cannot be commemorated')


DEFAULT_RULES = PrecedenceRules(
    commemorable=MEMORIALS | {PrecedenceRank.COMMEMORATION},
    forbids_commemoration=[
        PrecedenceRank.SOLEMNITY,
        PrecedenceRank.SUNDAY_OF_EASTER,
        PrecedenceRank.SUNDAY_OF_LENT,
        PrecedenceRank.SUNDAY_OF_ADVENT,
        PrecedenceRank.TRIDUUM,
        PrecedenceRank.PRIVILEGED_WEEKDAY,
    ],
    # Obligatory memorials falling on Monday to Wednesday of Holy Week
    coexist_with_fixed={
        PrecedenceRank.HOLY_WEEK: [PrecedenceRank.MEMORIAL,
                                   PrecedenceRank.MEMORIAL_MARTYR],
    },
    # Memorials falling on a weekday of Lent
    privileged_over={
        PrecedenceRank.WEEKDAY_OF_LENT: MEMORIALS,
    },
)


@dataclass(frozen=True)
class Resolution:
    celebrated: ResolvedObservance
    commemorations: Tuple[ResolvedObservance, ...] = ()
    suppressed: Tuple[ResolvedObservance, ...] = ()

    @property
    def observances(self):
        """The celebrated observance followed by the commemorations."""
        return (self.celebrated,) + self.commemorations


def _commemorate(observance):
    return replace(observance, rank=PrecedenceRank.COMMEMORATION, commemoration=True)


def _privileged(ordered, rules):
    """Return the first weekday that takes precedence over every candidate
    ranked above it, or None."""
    for candidate in ordered:
        outranked = rules.privileged_over.get(candidate.rank)
        if outranked is None:
            continue
        if all(other.rank in outranked for other in ordered
               if other.rank > candidate.rank):
            return candidate
    return None


def resolve(candidates, registry):
    """Resolve the observances of one date.

    Arguments
    ---------
    `candidates` : sequence of ResolvedObservance
        Observances whose resolved date is the same.
    `registry` : DefinitionRegistry
        Supplies the rule table and the tie-break order: a later layer beats
        an earlier one, then earlier declarations beat later ones.

    Returns
    -------
        A `Resolution`. Commemorations carry the `COMMEMORATION` rank;
        suppressed candidates keep theirs.
    """
    if not candidates:
        raise ValueError('No observance to resolve')
    rules = registry.rules
    ordered = sorted(candidates, key=lambda obs: (
        -obs.rank.rank,
        -registry.layer_index(obs.definition.layer),
        registry.position(obs.key)))

    commemorations, suppressed = [], []
    fixed = [obs for obs in ordered if not obs.rank.displaceable]
    if fixed:
        # A day that cannot be displaced wins outright
        winner = fixed[0]
        kept = rules.coexist_with_fixed.get(winner.rank, frozenset())
        for obs in ordered:
            if obs is winner:
                continue
            (commemorations if obs.rank in kept else suppressed).append(obs)
    else:
        winner = _privileged(ordered, rules) or ordered[0]
        allowed = winner.rank not in rules.forbids_commemoration
        for obs in ordered:
            if obs is winner:
                continue
            if obs.rank > winner.rank:
                # Outranked only through the weekday's privilege
                commemorations.append(obs)
            elif obs.rank < winner.rank and allowed and obs.rank in rules.commemorable:
                commemorations.append(obs)
            else:
                suppressed.append(obs)

    return Resolution(
        celebrated=winner,
        commemorations=tuple(_commemorate(obs) for obs in commemorations),
        suppressed=tuple(suppressed))
