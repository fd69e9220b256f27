import dataclasses
import pytest
from hexrating.exchanger import (
    UNSET,
    is_unset,
    ShellProperties,
    TubeProperties,
    BaffleProperties,
    Exchanger
)
from conftest import SHELL, TUBES, BAFFLES


def test_new_record_is_unset_and_incomplete():
    tubes = TubeProperties()
    assert not tubes.is_complete()
    assert tubes.missing() == TubeProperties.keys()
    assert all(v is None for v in tubes.to_mapping().values())


def test_blank_values_are_normalized_to_unset():
    shell = ShellProperties.from_mapping({'material': '   ', 'orientation': None})
    assert shell.material is UNSET
    assert shell.orientation is UNSET
    assert is_unset('')
    assert not is_unset(0)


def test_complete_records(exchanger):
    assert exchanger.shell.is_complete()
    assert exchanger.tubes.is_complete()
    assert exchanger.baffles.is_complete()


def test_from_mapping_ignores_unknown_keys_and_accepts_attribute_names():
    tubes = TubeProperties.from_mapping({'numTubes': 20, 'outer_diameter': 19, 'colour': 'red'})
    assert tubes.num_tubes == 20
    assert tubes.outer_diameter == 19
    assert 'colour' not in tubes.to_mapping()


def test_to_mapping_round_trips_editor_keys():
    shell = ShellProperties.from_mapping(SHELL)
    assert shell.to_mapping() == SHELL


def test_records_are_immutable(exchanger):
    with pytest.raises(dataclasses.FrozenInstanceError):
        exchanger.tubes.num_tubes = 10  # noqa


def test_replace_returns_modified_copy(exchanger):
    tubes = exchanger.tubes.replace(numTubes=40)
    assert tubes.num_tubes == 40
    assert exchanger.tubes.num_tubes == 20
    assert exchanger.tubes.unset('tubePitch').missing() == ['tubePitch']


def test_number_reads_numbers_and_numeric_text():
    baffles = BaffleProperties.from_mapping({**BAFFLES, 'spacing': ' 150 '})
    assert baffles.number('spacing') == 150.0
    assert baffles.number('outerCutPercent') == 25.0


def test_number_rejects_text_and_unset():
    baffles = BaffleProperties.from_mapping({'baffleType': 'single segmental'})
    with pytest.raises(ValueError):
        baffles.number('baffleType')
    with pytest.raises(ValueError):
        baffles.number('spacing')


def test_unknown_key_raises_key_error():
    with pytest.raises(KeyError):
        ShellProperties().get('colour')


def test_units_are_editor_units():
    units = TubeProperties.units()
    assert units['effectiveTubeLength'] == 'mm'
    assert units['flowRate'] == 'kg / hr'
    assert units['material'] is None


def test_exchanger_replace_part(exchanger):
    other = exchanger.replace(baffles=BaffleProperties())
    assert other.baffles.missing() == BaffleProperties.keys()
    assert other.shell == exchanger.shell
    assert Exchanger().tubes == TubeProperties()
