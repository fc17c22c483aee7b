"""A value that varies with the contrast level."""

from __future__ import annotations

from dataclasses import dataclass


def _lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


@dataclass(frozen=True)
class ContrastCurve:
    """Values for contrast levels -1.0, 0.0, 0.5 and 1.0, interpolated between."""

    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """Return the value at ``contrast_level``, from -1.0 (lowest) to 1.0 (highest)."""
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return _lerp(self.low, self.normal, (contrast_level + 1.0) / 1.0)
        if contrast_level < 0.5:
            return _lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return _lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high