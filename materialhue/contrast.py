"""Contrast ratios between tones and tones that reach a wanted contrast."""

from __future__ import annotations

import sys

from materialhue.color import lstar_from_y, y_from_lstar

_EPSILON = sys.float_info.epsilon


def _in_tone_range(value: float) -> bool:
    return 0.0 <= value <= 100.0


def _clamp_tone(tone: float) -> float:
    return min(max(tone, 0.0), 100.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """Return the contrast ratio of two tones, from 1 to 21.

    Tones outside 0..100 are clamped.
    """
    return _ratio_of_ys(y_from_lstar(_clamp_tone(tone_a)), y_from_lstar(_clamp_tone(tone_b)))


def _ratio_of_ys(y1: float, y2: float) -> float:
    lighter_y = y1 if y1 > y2 else y2
    darker_y = y1 if abs(lighter_y - y2) < _EPSILON else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def lighter(tone: float, ratio: float) -> float:
    """Return a tone >= ``tone`` reaching ``ratio``, or -1 if none exists."""
    if not _in_tone_range(tone):
        return -1.0

    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = _ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > 0.04:
        return -1.0

    # Nudge slightly so gamut mapping still leaves the wanted ratio.
    result = lstar_from_y(light_y) + 0.4
    if not _in_tone_range(result):
        return -1.0
    return result


def darker(tone: float, ratio: float) -> float:
    """Return a tone <= ``tone`` reaching ``ratio``, or -1 if none exists."""
    if not _in_tone_range(tone):
        return -1.0

    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    real_contrast = _ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > 0.04:
        return -1.0

    # Nudge slightly so gamut mapping still leaves the wanted ratio.
    result = lstar_from_y(dark_y) - 0.4
    if not _in_tone_range(result):
        return -1.0
    return result


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`lighter`, but return 100 when the ratio cannot be reached."""
    result = lighter(tone, ratio)
    return 100.0 if result < 0.0 else result


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`darker`, but return 0 when the ratio cannot be reached."""
    result = darker(tone, ratio)
    return 0.0 if result < 0.0 else result