# tests/test_registry.py

import pytest

from litcalendar.config import CalendarConfiguration
from litcalendar.constants import PrecedenceRank, SeasonKind
from litcalendar.data import particular_calendar, PROPER_OF_TIME, GENERAL_ROMAN
from litcalendar.errors import ConfigurationConflictError, UnknownKeyError
from litcalendar.models import Drop, FixedDate, Layer, ObservanceDefinition
from litcalendar.precedence import PrecedenceRules
from litcalendar.registry import build_registry, merge_layers


def local(*entries, rules=None):
    return Layer('local', tuple(entries), rules)


def test_registry_is_deterministic():
    configuration = CalendarConfiguration(particular=particular_calendar('united_states'))
    first = build_registry(configuration)
    second = build_registry(configuration)
    assert list(first.definitions) == list(second.definitions)
    assert dict(first.definitions) == dict(second.definitions)


def test_layers_in_merge_order():
    registry = build_registry(CalendarConfiguration(particular=particular_calendar('sri_lanka')))
    assert registry.layer_names == (PROPER_OF_TIME, GENERAL_ROMAN, 'sri_lanka')
    assert registry.layer_index('sri_lanka') > registry.layer_index(GENERAL_ROMAN)
    assert registry.get('joseph_vaz_priest').layer == 'sri_lanka'
    assert registry.get('easter_sunday').layer == PROPER_OF_TIME


def test_override_replaces_whole_definition_and_keeps_position():
    base = build_registry(CalendarConfiguration())
    registry = build_registry(CalendarConfiguration(particular=particular_calendar('united_states')))
    guadalupe = registry.get('our_lady_of_guadalupe')
    assert guadalupe.precedence is PrecedenceRank.FEAST
    assert guadalupe.layer == 'united_states'
    assert guadalupe.replaces == GENERAL_ROMAN
    assert registry.position('our_lady_of_guadalupe') == base.position('our_lady_of_guadalupe')
    assert registry.get('lucy').replaces is None


def test_drop_removes_a_definition():
    registry = build_registry(CalendarConfiguration(particular=local(Drop('lucy'))))
    assert 'lucy' not in registry
    with pytest.raises(UnknownKeyError):
        registry.get('lucy')


def test_drop_of_unknown_key():
    with pytest.raises(ConfigurationConflictError) as excinfo:
        build_registry(CalendarConfiguration(particular=local(Drop('no_such_saint'))))
    assert excinfo.value.layer == 'local'


def test_key_declared_twice_in_one_layer():
    definition = ObservanceDefinition('saint', PrecedenceRank.MEMORIAL, FixedDate(5, 5))
    with pytest.raises(ConfigurationConflictError):
        merge_layers([local(definition, definition)])


@pytest.mark.parametrize('definition', [
    ObservanceDefinition('bad_day', PrecedenceRank.MEMORIAL, FixedDate(2, 30)),
    ObservanceDefinition('bad_month', PrecedenceRank.MEMORIAL, FixedDate(13, 1)),
    ObservanceDefinition('bad_rank', 'MEMORIAL', FixedDate(5, 5)),
    ObservanceDefinition('bad_anchor', PrecedenceRank.MEMORIAL, '05-05'),
    ObservanceDefinition('bad_season', PrecedenceRank.MEMORIAL, FixedDate(5, 5), ('lent',)),
])
def test_malformed_definitions(definition):
    with pytest.raises(ConfigurationConflictError) as excinfo:
        build_registry(CalendarConfiguration(particular=local(definition)))
    assert excinfo.value.layer == 'local'


def test_february_29_is_a_valid_declaration():
    definition = ObservanceDefinition('leap_day', PrecedenceRank.OPT_MEMORIAL,
                                      FixedDate(2, 29), (SeasonKind.LENT,))
    registry = merge_layers([local(definition)])
    assert registry.get('leap_day').anchor == FixedDate(2, 29)


def test_contradictory_layer_rules():
    rules = PrecedenceRules(coexist_with_fixed={PrecedenceRank.MEMORIAL: [PrecedenceRank.OPT_MEMORIAL]})
    with pytest.raises(ConfigurationConflictError) as excinfo:
        build_registry(CalendarConfiguration(particular=local(rules=rules)))
    assert excinfo.value.layer == 'local'


def test_layer_rules_replace_configuration_rules():
    rules = PrecedenceRules(commemorable=[PrecedenceRank.MEMORIAL])
    registry = build_registry(CalendarConfiguration(particular=local(rules=rules)))
    assert registry.rules is rules


def test_proper_of_time_definitions():
    registry = build_registry(CalendarConfiguration())
    proper = registry.proper_of_time()
    assert 'easter_sunday' in proper
    assert 'christ_the_king' in proper
    assert 'lucy' not in proper
    assert all(d.layer == PROPER_OF_TIME for d in proper.values())


def test_ascension_on_sunday_removes_seventh_sunday_of_easter():
    registry = build_registry(CalendarConfiguration(ascension_on_sunday=True))
    assert 'easter_7_sunday' not in registry
    assert 'easter_7_monday' in registry


def test_definitions_are_read_only():
    registry = build_registry(CalendarConfiguration())
    with pytest.raises(TypeError):
        registry.definitions['lucy'] = None
