"""Tests for swatchbook.color: storage, accessors, rounding policy and hex constructors."""

import math

import pytest
from swatchbook import Color
from swatchbook.core.conversions import round_to_precision, srgb_to_linear


class TestConstruction:
    def test_non_linear_values_preserved(self):
        color = Color(red=0.5, green=0.7, blue=0.3, opacity=0.8, name='Test')
        assert color.name == 'Test'
        assert color.opacity == 0.8
        assert color.red == pytest.approx(0.5, abs=1e-3)
        assert color.green == pytest.approx(0.7, abs=1e-3)
        assert color.blue == pytest.approx(0.3, abs=1e-3)

    def test_stored_linear(self):
        color = Color(red=0.5, green=0.7, blue=0.3)
        linear = color.linear_components
        assert linear['red'] == round_to_precision(srgb_to_linear(0.5))
        assert linear['green'] == round_to_precision(srgb_to_linear(0.7))
        assert linear['blue'] == round_to_precision(srgb_to_linear(0.3))

    def test_linear_input_preserved(self):
        color = Color(red=0.5, green=0.7, blue=0.3, is_linear=True)
        assert color.linear_components == {'red': 0.5, 'green': 0.7, 'blue': 0.3, 'opacity': 1.0}

    def test_defaults(self):
        color = Color(red=0, green=0, blue=0)
        assert color.name is None
        assert color.opacity == 1.0

    def test_opacity_clamped_on_construction(self):
        assert Color(red=0, green=0, blue=0, opacity=2).opacity == 1.0
        assert Color(red=0, green=0, blue=0, opacity=-1).opacity == 0.0

    def test_wide_gamut_values_allowed(self):
        color = Color(red=1.2, green=-0.1, blue=0.5)
        assert color.linear_components['red'] > 1.0
        assert color.linear_components['green'] < 0.0
        assert color.red == pytest.approx(1.2, abs=1e-3)
        assert color.green == pytest.approx(-0.1, abs=1e-3)

    def test_rounding_boundary(self):
        color = Color(red=0.12345, green=0.1235, blue=0.12344, opacity=0.12349, is_linear=True)
        assert color.linear_components == {
            'red': 0.1235,
            'green': 0.1235,
            'blue': 0.1234,
            'opacity': 0.1235,
        }


class TestValidation:
    @pytest.mark.parametrize('channel', ['red', 'green', 'blue'])
    def test_non_numeric_channel(self, channel):
        values = {'red': 0, 'green': 0, 'blue': 0, channel: 'invalid'}
        with pytest.raises(TypeError, match=f'{channel.capitalize()} component must be a number'):
            Color(**values)

    def test_non_numeric_opacity(self):
        with pytest.raises(TypeError, match='Opacity component must be a number'):
            Color(red=0, green=0, blue=0, opacity='invalid')

    def test_bool_is_not_a_number(self):
        with pytest.raises(TypeError, match='must be a number'):
            Color(red=True, green=0, blue=0)

    def test_non_finite_rejected(self):
        for value in (math.nan, math.inf, -math.inf):
            with pytest.raises(TypeError, match='must be a number'):
                Color(red=value, green=0, blue=0)

    def test_missing_channel(self):
        with pytest.raises(TypeError):
            Color(red=0, green=0)

    def test_overflowing_non_linear_value(self):
        with pytest.raises(TypeError, match='Red component must be a number'):
            Color(red=1e200, green=0, blue=0)

    def test_unroundable_linear_values(self):
        with pytest.raises(TypeError, match='Green component must be a number'):
            Color(red=0, green=1e305, blue=0, is_linear=True)
        with pytest.raises(TypeError, match='Blue component must be a number'):
            Color(red=0, green=0, blue=10 ** 400, is_linear=True)

    def test_huge_int_opacity(self):
        with pytest.raises(TypeError, match='Opacity component must be a number'):
            Color(red=0, green=0, blue=0, opacity=10 ** 400)

    def test_large_finite_values_kept(self):
        color = Color(red=1e6, green=0, blue=10 ** 12, is_linear=True)
        assert color.to_json()['components'] == [1e6, 0.0, 1e12]

    def test_overflowing_setter_leaves_value_untouched(self):
        color = Color(red=0, green=0, blue=0)
        for value in (1e200, 1e128, 10 ** 400):
            with pytest.raises(TypeError, match='Red component must be a number'):
                color.red = value
        assert color.linear_components['red'] == 0.0
        assert color.to_json()['components'] == [0.0, 0.0, 0.0]


class TestAccessors:
    def test_setters_update_both_views(self):
        color = Color(red=0.5, green=0.5, blue=0.5)
        color.red = 1
        color.green = 0
        color.blue = 0
        assert color.components == pytest.approx({'red': 1.0, 'green': 0.0, 'blue': 0.0, 'opacity': 1.0})
        assert color.linear_components['red'] == pytest.approx(1.0)
        assert color.linear_components['green'] == 0.0

    def test_setters_do_not_round(self):
        color = Color(red=0, green=0, blue=0)
        color.red = 0.5
        assert color.linear_components['red'] == srgb_to_linear(0.5)
        assert color.linear_components['red'] != round_to_precision(srgb_to_linear(0.5))

    def test_incremental_edits_do_not_accumulate_rounding(self):
        color = Color(red=0.1, green=0.1, blue=0.1)
        start = color.red
        for _ in range(5):
            color.red += 0.1
        assert color.red == pytest.approx(start + 0.5, abs=1e-9)

    def test_setter_validation(self):
        color = Color(red=0, green=0, blue=0)
        with pytest.raises(TypeError, match='Green component must be a number'):
            color.green = 'invalid'
        with pytest.raises(TypeError, match='number'):
            color.red = None
        with pytest.raises(TypeError, match='number'):
            color.blue = [1]

    def test_opacity_setter_clamps(self):
        color = Color(red=0, green=0, blue=0)
        color.opacity = 1.5
        assert color.opacity == 1.0
        color.opacity = -0.5
        assert color.opacity == 0.0
        color.opacity = 0.25
        assert color.opacity == 0.25

    def test_opacity_setter_validation(self):
        color = Color(red=0, green=0, blue=0)
        with pytest.raises(TypeError, match='Opacity must be a number'):
            color.opacity = 'invalid'

    def test_components_are_snapshots(self):
        color = Color(red=0.2, green=0.4, blue=0.6)
        snapshot = color.components
        color.red = 0.9
        assert snapshot['red'] == pytest.approx(0.2, abs=1e-3)
        assert color.components['red'] == pytest.approx(0.9, abs=1e-9)

    def test_non_linear_view_not_cached(self):
        color = Color(red=0.2, green=0.2, blue=0.2)
        color.red = 0.8
        assert color.red == pytest.approx(0.8, abs=1e-9)


class TestToJson:
    def test_opaque_named(self):
        color = Color(red=1, green=0, blue=0, name='Red')
        assert color.to_json() == {'components': [1.0, 0.0, 0.0], 'name': 'Red'}

    def test_alpha_included_when_not_opaque(self):
        color = Color(red=0, green=1, blue=0, opacity=0.5)
        assert color.to_json() == {'components': [0.0, 1.0, 0.0, 0.5]}

    def test_empty_name_omitted(self):
        assert 'name' not in Color(red=0, green=0, blue=0, name='').to_json()

    def test_rounds_values_written_by_setters(self):
        color = Color(red=0, green=0, blue=0)
        color.red = 0.5
        assert color.to_json()['components'][0] == 0.214

    def test_precision(self):
        color = Color(red=0.12345, green=0.1235, blue=0.12344, opacity=0.12349, is_linear=True)
        assert color.to_json()['components'] == [0.1235, 0.1235, 0.1234, 0.1235]


class TestFromHexString:
    @pytest.mark.parametrize('value', ['#FF0000', 'F00', '#f00', 'ff0000FF'])
    def test_red(self, value):
        color = Color.from_hex_string(value)
        assert color.red == pytest.approx(1.0)
        assert color.green == 0.0
        assert color.blue == 0.0
        assert color.opacity == 1.0

    def test_eight_digit_alpha(self):
        color = Color.from_hex_string('#FF000080')
        assert color.red == pytest.approx(1.0)
        assert color.opacity == pytest.approx(0.5, abs=0.01)
        assert color.opacity == 0.502

    def test_four_digit_alpha(self):
        color = Color.from_hex_string('F008')
        assert color.red == pytest.approx(1.0)
        assert color.opacity == pytest.approx(0.533, abs=1e-3)

    def test_values_are_non_linear(self):
        color = Color.from_hex_string('#808080')
        assert color.red == pytest.approx(128 / 255, abs=1e-3)
        assert color.linear_components['red'] == round_to_precision(srgb_to_linear(128 / 255))

    def test_name(self):
        assert Color.from_hex_string('#00F', name='Blue').name == 'Blue'

    @pytest.mark.parametrize('value', ['', '#', '#F', '#FF', '#FFFFF', '#FFFFFFF', '#GG0000'])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match='Invalid hex color format'):
            Color.from_hex_string(value)


class TestFromHexNumber:
    def test_short(self):
        color = Color.from_hex_number(0xF00)
        assert color.red == pytest.approx(1.0)
        assert color.green == 0.0
        assert color.opacity == 1.0

    def test_short_with_alpha(self):
        assert Color.from_hex_number(0xF008).opacity == pytest.approx(0.533, abs=1e-3)

    def test_magnitude_decides_layout(self):
        # 0x00FF00 fits in 16 bits, so it is read as 0xRGBA (F, F, 0, 0)
        color = Color.from_hex_number(0x00FF00, name='Lime?')
        assert color.name == 'Lime?'
        assert color.red == pytest.approx(1.0)
        assert color.green == pytest.approx(1.0)
        assert color.blue == 0.0
        assert color.opacity == 0.0

    def test_full_bytes(self):
        color = Color.from_hex_number(0x336699)
        assert color.red == pytest.approx(0x33 / 255, abs=1e-3)
        assert color.green == pytest.approx(0x66 / 255, abs=1e-3)
        assert color.blue == pytest.approx(0x99 / 255, abs=1e-3)

    def test_bytes_with_alpha(self):
        assert Color.from_hex_number(0xFF000080).opacity == 0.502

    @pytest.mark.parametrize('value', [-1, 0x100000000, 1.5])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match='Invalid hex value'):
            Color.from_hex_number(value)
