import dataclasses

import pytest

from materialhue.dynamic_scheme import DynamicScheme, get_rotated_hue
from materialhue.variant import Variant


def _scheme(**overrides):
    values = dict(
        source_color_hct=(43.0, 16.0, 16.0),
        variant=Variant.TONAL_SPOT,
        is_dark=False,
        primary_palette=("primary", 43.0, 36.0),
        secondary_palette=("secondary", 43.0, 16.0),
        tertiary_palette=("tertiary", 103.0, 24.0),
        neutral_palette=("neutral", 43.0, 6.0),
        neutral_variant_palette=("neutral_variant", 43.0, 8.0),
        error_palette=("error", 25.0, 84.0),
    )
    values.update(overrides)
    return DynamicScheme(**values)


def test_0_length_input():
    assert get_rotated_hue(43.0, [], []) == pytest.approx(43.0, abs=1.0)


def test_1_length_input_no_rotation():
    assert get_rotated_hue(43.0, [0.0], [0.0]) == pytest.approx(43.0, abs=1.0)


def test_on_boundary_rotation_correct():
    hue = get_rotated_hue(43.0, [0.0, 42.0, 360.0], [0.0, 15.0, 0.0])
    assert hue == pytest.approx(58.0, abs=1.0)


def test_rotation_result_larger_than_360_degrees_wraps():
    hue = get_rotated_hue(43.0, [0.0, 42.0, 360.0], [0.0, 480.0, 0.0])
    assert hue == pytest.approx(163.0, abs=1.0)


def test_single_rotation_wraps_negative():
    assert get_rotated_hue(10.0, [0.0], [-30.0]) == pytest.approx(340.0)


def test_hue_on_boundary_is_not_rotated():
    assert get_rotated_hue(42.0, [0.0, 42.0, 360.0], [5.0, 15.0, 0.0]) == 42.0


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        get_rotated_hue(43.0, [0.0, 42.0], [0.0])


def test_default_contrast_level_is_zero():
    assert _scheme().contrast_level == 0.0


def test_equal_schemes_compare_and_hash_equal():
    first = _scheme(contrast_level=0.5)
    second = _scheme(contrast_level=0.5)
    assert first == second
    assert hash(first) == hash(second)


def test_schemes_differing_in_mode_are_unequal():
    assert _scheme(is_dark=True) != _scheme(is_dark=False)


def test_schemes_differing_in_variant_are_unequal():
    assert _scheme(variant=Variant.VIBRANT) != _scheme(variant=Variant.TONAL_SPOT)


def test_scheme_is_immutable():
    scheme = _scheme()
    with pytest.raises(dataclasses.FrozenInstanceError):
        scheme.is_dark = True
    assert scheme.is_dark is False
    assert scheme == _scheme()


def test_invalid_variant_raises():
    with pytest.raises(TypeError):
        _scheme(variant="tonal_spot")