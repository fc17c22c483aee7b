import pytest

from materialhue.contrast import (
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
)


def test_ratio_of_tones_out_of_bounds_input():
    assert ratio_of_tones(-10.0, 110.0) == pytest.approx(21.0, abs=0.001)


def test_lighter_impossible_ratio_errors():
    assert lighter(90.0, 10.0) == pytest.approx(-1.0, abs=0.001)


def test_lighter_out_of_bounds_input_above_errors():
    assert lighter(110.0, 2.0) == pytest.approx(-1.0, abs=0.001)


def test_lighter_out_of_bounds_input_below_errors():
    assert lighter(-10.0, 2.0) == pytest.approx(-1.0, abs=0.001)


def test_lighter_unsafe_returns_max_tone():
    assert lighter_unsafe(100.0, 2.0) == pytest.approx(100.0, abs=0.001)


def test_darker_impossible_ratio_errors():
    assert darker(10.0, 20.0) == pytest.approx(-1.0, abs=0.001)


def test_darker_out_of_bounds_input_above_errors():
    assert darker(110.0, 2.0) == pytest.approx(-1.0, abs=0.001)


def test_darker_out_of_bounds_input_below_errors():
    assert darker(-10.0, 2.0) == pytest.approx(-1.0, abs=0.001)


def test_darker_unsafe_returns_min_tone():
    assert darker_unsafe(0.0, 2.0) == pytest.approx(0.0, abs=0.001)


def test_ratio_of_same_tone_is_one():
    assert ratio_of_tones(50.0, 50.0) == pytest.approx(1.0)


def test_ratio_of_black_and_white_is_maximum():
    assert ratio_of_tones(0.0, 100.0) == pytest.approx(21.0, abs=0.001)


@pytest.mark.parametrize("a,b", [(10.0, 90.0), (30.0, 40.0), (0.0, 55.0)])
def test_ratio_is_symmetric(a, b):
    assert ratio_of_tones(a, b) == pytest.approx(ratio_of_tones(b, a))


@pytest.mark.parametrize("tone,ratio", [(20.0, 3.0), (40.0, 4.5), (10.0, 7.0)])
def test_lighter_reaches_ratio(tone, ratio):
    result = lighter(tone, ratio)
    assert tone < result <= 100.0
    assert ratio_of_tones(result, tone) >= ratio


@pytest.mark.parametrize("tone,ratio", [(80.0, 3.0), (60.0, 4.5), (100.0, 7.0)])
def test_darker_reaches_ratio(tone, ratio):
    result = darker(tone, ratio)
    assert 0.0 <= result < tone
    assert ratio_of_tones(result, tone) >= ratio


def test_unsafe_variants_match_safe_when_possible():
    assert lighter_unsafe(20.0, 3.0) == lighter(20.0, 3.0)
    assert darker_unsafe(80.0, 3.0) == darker(80.0, 3.0)


def test_nan_tone_is_rejected():
    assert lighter(float("nan"), 2.0) == -1.0
    assert darker(float("nan"), 2.0) == -1.0