"""Choosing foreground tones that contrast with a background tone."""

from __future__ import annotations

import math

from materialhue.contrast import darker_unsafe, lighter_unsafe, ratio_of_tones


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def tone_prefers_light_foreground(tone: float) -> bool:
    """Return whether ``tone`` prefers a light foreground.

    Tones below about T60 do; T60 itself is excluded so that it stays put.
    """
    return _round_half_away(tone) < 60.0


def tone_allows_light_foreground(tone: float) -> bool:
    """Return whether ``tone`` can reach a 4.5 contrast ratio with a lighter color."""
    return _round_half_away(tone) <= 49.0


def enable_light_foreground(tone: float) -> float:
    """Move ``tone`` to T49 if it prefers a light foreground but cannot carry one."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """Return a foreground tone whose contrast with ``bg_tone`` is as near ``ratio`` as possible."""
    lighter_tone = lighter_unsafe(bg_tone, ratio)
    darker_tone = darker_unsafe(bg_tone, ratio)
    lighter_ratio = ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # When neither side reaches a high requested ratio and they are close,
        # keep the light foreground rather than flipping to a dark one.
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone