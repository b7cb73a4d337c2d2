from fractions import Fraction

import pytest

from shapeshift.models.layout_configuration import LayoutConfiguration
from shapeshift.models.layout_errors import ConfigurationError
from shapeshift.models.layout_item import LayoutItem, is_valid_measurement
from shapeshift.widgets.masonry_columns import ColumnModel
from shapeshift.widgets.masonry_layout import pack
from shapeshift.utils import settings as settings_module


class FakeSettings:
    def __init__(self, values=None):
        self._values = values or {}

    def value(self, key, defaultValue=None, type=None):
        value = self._values.get(key, defaultValue)
        return type(value) if type is not None else value


def test_from_options_defaults():
    assert LayoutConfiguration.from_options() == LayoutConfiguration(20, 10)
    assert LayoutConfiguration.from_options({}) == LayoutConfiguration(20, 10)


def test_from_options_reads_gutter_pair():
    configuration = LayoutConfiguration.from_options({'gutter': (5, 7.5)})

    assert configuration.gutter_x == 5
    assert configuration.gutter_y == 7.5


def test_from_options_ignores_unknown_keys():
    configuration = LayoutConfiguration.from_options({'animate': True})

    assert configuration == LayoutConfiguration()


def test_from_options_merges_over_given_defaults():
    defaults = LayoutConfiguration(4, 4)

    assert LayoutConfiguration.from_options({'speed': 1}, defaults=defaults) is defaults


@pytest.mark.parametrize("gutter", [[10], [1, 2, 3], "10", 10, [10, "x"], [-1, 0], [0, float('inf')]])
def test_from_options_rejects_bad_gutters(gutter):
    with pytest.raises(ConfigurationError):
        LayoutConfiguration.from_options({'gutter': gutter})


def test_is_valid_measurement():
    assert is_valid_measurement(0)
    assert is_valid_measurement(12.5)
    for value in (None, -1, float('nan'), float('inf'), "10", True):
        assert not is_valid_measurement(value)


def test_is_valid_measurement_accepts_other_real_numbers():
    assert is_valid_measurement(Fraction(5, 2))
    assert not is_valid_measurement(Fraction(-1, 2))


def test_pack_places_fraction_sized_items():
    items = [LayoutItem(index=n, element=n, width=Fraction(100), height=Fraction(h, 2))
             for n, h in enumerate([100, 60])]

    packed = pack(items, ColumnModel(2), gutter_x=20, gutter_y=10)

    assert [(item.x, item.y) for item in packed] == [(0, 0), (120, 0)]


def test_layout_item_measurable():
    assert LayoutItem(index=0, element=None, width=100, height=0).measurable
    assert not LayoutItem(index=0, element=None, width=100, height=None).measurable


def test_get_default_configuration_uses_stored_gutters():
    stored = FakeSettings({'gutter_x': 12, 'gutter_y': 3})

    assert settings_module.get_default_configuration(stored) == LayoutConfiguration(12.0, 3.0)


def test_get_default_configuration_falls_back_to_defaults():
    configuration = settings_module.get_default_configuration(FakeSettings())

    assert configuration == LayoutConfiguration(
        settings_module.DEFAULT_SETTINGS['gutter_x'],
        settings_module.DEFAULT_SETTINGS['gutter_y'],
    )
