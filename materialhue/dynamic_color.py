"""Colors whose tone adapts to the UI state of a dynamic scheme."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from materialhue.contrast import darker, lighter, ratio_of_tones
from materialhue.contrast_curve import ContrastCurve
from materialhue.dynamic_scheme import DynamicScheme
from materialhue.foreground import foreground_tone, tone_prefers_light_foreground
from materialhue.tone_delta_pair import ToneDeltaPair, TonePolarity


def _clamp_tone(tone: float) -> float:
    return min(max(tone, 0.0), 100.0)


def _in_awkward_zone(tone: float) -> bool:
    return 50.0 <= tone < 60.0


@dataclass(frozen=True, eq=False)
class DynamicColor:
    """A color that adjusts its tone to the scheme it is resolved against.

    ``palette`` and ``tone`` are functions of a :class:`DynamicScheme`. A color
    with a ``background`` moves towards or away from it as the contrast level
    changes, following ``contrast_curve``; ``tone_delta_pair`` constrains its
    tone distance from another color.
    """

    name: str
    palette: Callable[[DynamicScheme], Any]
    tone: Callable[[DynamicScheme], float]
    is_background: bool = False
    background: Optional[Callable[[DynamicScheme], DynamicColor]] = None
    second_background: Optional[Callable[[DynamicScheme], DynamicColor]] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[Callable[[DynamicScheme], ToneDeltaPair]] = None

    @classmethod
    def from_palette(
        cls,
        name: str,
        palette: Callable[[DynamicScheme], Any],
        tone: Callable[[DynamicScheme], float],
    ) -> DynamicColor:
        """Build a color with no background, contrast curve or tone constraint."""
        return cls(name, palette, tone)

    def get_hct(self, scheme: DynamicScheme) -> Any:
        """Return the color from this color's palette at its resolved tone."""
        return self.palette(scheme).get_hct(self.get_tone(scheme))

    def _required_curve(self) -> ContrastCurve:
        if self.contrast_curve is None:
            raise ValueError(f"dynamic color {self.name!r} has no contrast curve")
        return self.contrast_curve

    def get_tone(self, scheme: DynamicScheme) -> float:
        """Return the tone this color takes under the conditions of ``scheme``."""
        if self.tone_delta_pair is not None:
            return self._pair_tone(scheme, self.tone_delta_pair(scheme))
        return self._single_tone(scheme)

    def _pair_tone(self, scheme: DynamicScheme, pair: ToneDeltaPair) -> float:
        if self.background is None:
            raise ValueError(
                f"dynamic color {self.name!r} has a tone delta pair but no background"
            )
        decreasing_contrast = scheme.contrast_level < 0.0
        bg_tone = self.background(scheme).get_tone(scheme)
        delta = pair.delta
        polarity = pair.polarity

        a_is_nearer = (
            polarity is TonePolarity.NEARER
            or (polarity is TonePolarity.LIGHTER and not scheme.is_dark)
            or (polarity is TonePolarity.DARKER and scheme.is_dark)
        )
        nearer, farther = (
            (pair.subject, pair.basis) if a_is_nearer else (pair.basis, pair.subject)
        )
        am_nearer = self.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0

        def initial(color: DynamicColor) -> float:
            contrast = color._required_curve().get(scheme.contrast_level)
            tone = color.tone(scheme)
            if not decreasing_contrast and ratio_of_tones(bg_tone, tone) >= contrast:
                return tone
            return foreground_tone(bg_tone, contrast)

        n_tone = initial(nearer)
        f_tone = initial(farther)

        if (f_tone - n_tone) * expansion_dir < delta:
            # Expand the farther color to meet the delta, then contract the nearer one.
            f_tone = _clamp_tone(delta * expansion_dir + n_tone)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = _clamp_tone(-delta * expansion_dir + f_tone)

        def move_both_out() -> tuple[float, float]:
            if expansion_dir > 0.0:
                new_n = 60.0
                return new_n, max(f_tone, delta * expansion_dir + new_n)
            new_n = 49.0
            return new_n, min(f_tone, delta * expansion_dir + new_n)

        if _in_awkward_zone(n_tone):
            n_tone, f_tone = move_both_out()
        elif _in_awkward_zone(f_tone):
            if pair.stay_together:
                n_tone, f_tone = move_both_out()
            else:
                f_tone = 60.0 if expansion_dir > 0.0 else 49.0

        return n_tone if am_nearer else f_tone

    def _single_tone(self, scheme: DynamicScheme) -> float:
        answer = self.tone(scheme)
        if self.background is None:
            return answer

        decreasing_contrast = scheme.contrast_level < 0.0
        bg_tone = self.background(scheme).get_tone(scheme)
        desired_ratio = self._required_curve().get(scheme.contrast_level)

        if ratio_of_tones(bg_tone, answer) < desired_ratio or decreasing_contrast:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and _in_awkward_zone(answer):
            answer = 49.0 if ratio_of_tones(49.0, bg_tone) >= desired_ratio else 60.0

        if self.second_background is None:
            return answer

        bg_tone1 = bg_tone
        bg_tone2 = self.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone1, bg_tone2)
        lower = min(bg_tone1, bg_tone2)

        if (
            ratio_of_tones(upper, answer) >= desired_ratio
            and ratio_of_tones(lower, answer) >= desired_ratio
        ):
            return answer

        # -1 marks a ratio that cannot be reached on that side.
        light_option = lighter(upper, desired_ratio)
        dark_option = darker(lower, desired_ratio)
        availables = [option for option in (light_option, dark_option) if option != -1.0]

        if tone_prefers_light_foreground(bg_tone1) or tone_prefers_light_foreground(bg_tone2):
            return 100.0 if light_option < 0.0 else light_option

        if len(availables) == 1:
            return availables[0]

        return 0.0 if dark_option < 0.0 else dark_option