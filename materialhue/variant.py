"""The theme styles supported by dynamic color."""

from __future__ import annotations

import enum
from functools import total_ordering


@total_ordering
class Variant(enum.Enum):
    """A theme style; members are ordered as declared."""

    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit_salad"

    @property
    def _position(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self._position < other._position

    def __hash__(self) -> int:
        return hash(self.value)