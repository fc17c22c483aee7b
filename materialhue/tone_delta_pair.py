"""A tone-distance constraint between two dynamic colors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class TonePolarity(enum.Enum):
    """How the subject's tone relates to the basis tone.

    ``NEARER`` and ``FARTHER`` describe closeness to the surface roles:
    nearer means lighter in light mode and darker in dark mode.
    """

    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True)
class ToneDeltaPair:
    """Requires the tones of ``subject`` and ``basis`` to be ``delta`` apart.

    ``polarity`` describes the subject compared to the basis; for example a
    pair ``(a, b, 15, DARKER, ...)`` asks for ``a`` to be at least 15 darker
    than ``b``. ``stay_together`` keeps both roles on the same side of the
    awkward tone zone (T50-59). ``delta`` is an absolute distance.
    """

    subject: Any
    basis: Any
    delta: float
    polarity: TonePolarity
    stay_together: bool

    def __post_init__(self) -> None:
        if not isinstance(self.polarity, TonePolarity):
            raise TypeError(f"polarity must be a TonePolarity, got {self.polarity!r}")