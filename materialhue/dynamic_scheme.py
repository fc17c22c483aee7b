"""The UI state a dynamic color is resolved against, and hue rotation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from materialhue.variant import Variant


def _sanitize_degrees(degrees: float) -> float:
    return degrees % 360.0


def get_rotated_hue(
    source_hue: float, hues: Sequence[float], rotations: Sequence[float]
) -> float:
    """Rotate ``source_hue`` by the rotation of the hue interval it falls in.

    ``hues`` holds interval boundaries in ascending order; ``rotations[i]`` is
    applied when ``hues[i] < source_hue < hues[i + 1]``. A single rotation is
    applied unconditionally. Raises ValueError when the sequences differ in
    length.
    """
    if len(hues) != len(rotations):
        raise ValueError(
            f"hues and rotations must have the same length, "
            f"got {len(hues)} and {len(rotations)}"
        )

    if len(rotations) == 1:
        return _sanitize_degrees(source_hue + rotations[0])

    for this_hue, next_hue, rotation in zip(hues, hues[1:], rotations):
        if this_hue < source_hue < next_hue:
            return _sanitize_degrees(source_hue + rotation)

    return source_hue


@dataclass(frozen=True, order=True, kw_only=True)
class DynamicScheme:
    """A theme's UI state and the tonal palettes its colors are drawn from.

    ``contrast_level`` ranges from -1 (minimum contrast) through 0 (standard)
    to 1 (maximum contrast).
    """

    source_color_hct: Any
    variant: Variant
    is_dark: bool
    contrast_level: float = 0.0
    primary_palette: Any
    secondary_palette: Any
    tertiary_palette: Any
    neutral_palette: Any
    neutral_variant_palette: Any
    error_palette: Any

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Variant):
            raise TypeError(f"variant must be a Variant, got {self.variant!r}")