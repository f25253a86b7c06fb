# =============================================================================
# Definition registry: the ordered merge of calendar layers.
#
# Layers are applied in order over a mapping keyed by observance key. A
# definition inserts a new key or wholly replaces the definition already
# registered under it; a `Drop` removes the key. Replaced keys keep their
# place in the merged order.
# =============================================================================

from dataclasses import replace
from types import MappingProxyType
import logging

from .constants import PrecedenceRank, SeasonKind
from .errors import ConfigurationConflictError, UnknownKeyError
from .models import ANCHOR_TYPES, Drop, ObservanceDefinition
from .precedence import DEFAULT_RULES, PrecedenceRules

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Merged, read-only view of the definitions of a configuration."""

    def __init__(self, definitions, rules, layer_names):
        self._definitions = MappingProxyType(dict(definitions))
        self._positions = {key: i for i, key in enumerate(self._definitions)}
        self._rules = rules
        self._layer_names = tuple(layer_names)
        self._layer_indexes = {name: i for i, name in enumerate(self._layer_names)}

    @property
    def definitions(self):
        return self._definitions

    @property
    def rules(self):
        return self._rules

    @property
    def layer_names(self):
        return self._layer_names

    def layer_index(self, name):
        """Position of layer `name` in the merge order; later layers win
        same-rank ties."""
        return self._layer_indexes[name]

    def position(self, key):
        return self._positions[key]

    def get(self, key):
        try:
            return self._definitions[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def from_layer(self, name):
        """Definitions contributed by layer `name`, overrides included."""
        return MappingProxyType({key: definition
                                 for key, definition in self._definitions.items()
                                 if definition.layer == name})

    def proper_of_time(self):
        """Definitions still supplied by the base layer."""
        return self.from_layer(self._layer_names[0]) if self._layer_names \
            else MappingProxyType({})

    def __contains__(self, key):
        return key in self._definitions

    def __iter__(self):
        return iter(self._definitions)

    def __len__(self):
        return len(self._definitions)

    def __repr__(self):
        return (f'DefinitionRegistry(layers={list(self._layer_names)}, '
                f'definitions={len(self._definitions)})')


def _check_definition(definition, layer):
    def conflict(message):
        return ConfigurationConflictError(
            f'{layer}: {definition.key}: {message}', layer=layer)

    if not isinstance(definition.key, str) or not definition.key:
        raise conflict('key must be a non-empty string')
    if not isinstance(definition.precedence, PrecedenceRank):
        raise conflict(f'not a precedence rank: {definition.precedence!r}')
    if not isinstance(definition.anchor, ANCHOR_TYPES):
        raise conflict(f'not a date anchor: {definition.anchor!r}')
    try:
        definition.anchor.validate()
    except ConfigurationConflictError as e:
        raise conflict(str(e)) from e
    for season in definition.seasons:
        if not isinstance(season, SeasonKind):
            raise conflict(f'not a season: {season!r}')


def merge_layers(layers, rules=None):
    """Merge `layers` in order into a `DefinitionRegistry`.

    Arguments
    ---------
    `layers` : sequence of Layer
        Calendar sources, base layer first.
    `rules` : PrecedenceRules
        Rule table used unless a layer supplies its own; the last layer
        supplying one wins. Defaults to `DEFAULT_RULES`.

    Raises
    ------
        `ConfigurationConflictError` for a malformed entry, a key declared
        twice within one layer, a `Drop` of a key that is not registered, two
        layers sharing a name, or a self-contradictory rule table.
    """
    rules = DEFAULT_RULES if rules is None else rules
    if not isinstance(rules, PrecedenceRules):
        raise ConfigurationConflictError(f'Not a rule table: {rules!r}')
    merged = {}
    names = []
    for layer in layers:
        if layer.name in names:
            raise ConfigurationConflictError(
                f'Layer {layer.name!r} is applied twice', layer=layer.name)
        names.append(layer.name)

        if layer.rules is not None:
            if not isinstance(layer.rules, PrecedenceRules):
                raise ConfigurationConflictError(
                    f'{layer.name}: not a rule table: {layer.rules!r}',
                    layer=layer.name)
            layer.rules.validate(layer=layer.name)
            rules = layer.rules

        seen = set()
        for entry in layer.entries:
            if not isinstance(entry, (ObservanceDefinition, Drop)):
                raise ConfigurationConflictError(
                    f'{layer.name}: not a definition: {entry!r}', layer=layer.name)
            if entry.key in seen:
                raise ConfigurationConflictError(
                    f'{layer.name}: {entry.key} is declared twice', layer=layer.name)
            seen.add(entry.key)

            if isinstance(entry, Drop):
                if entry.key not in merged:
                    raise ConfigurationConflictError(
                        f'{layer.name}: cannot drop {entry.key}, which is not '
                        f'defined by an earlier layer', layer=layer.name)
                logger.debug('%s: dropping %s', layer.name, entry.key)
                del merged[entry.key]
                continue

            _check_definition(entry, layer.name)
            previous = merged.get(entry.key)
            if previous is not None:
                logger.debug('%s: %s overrides the %s definition',
                             layer.name, entry.key, previous.layer)
            merged[entry.key] = replace(
                entry, layer=layer.name,
                replaces=previous.layer if previous is not None else None)

    rules.validate()
    return DefinitionRegistry(merged, rules, names)


def build_registry(configuration):
    """Build the registry of `configuration` from its layers."""
    registry = merge_layers(configuration.layers, configuration.rules)
    logger.info('Built registry of %d definitions from layers %s',
                len(registry), ', '.join(registry.layer_names))
    return registry
