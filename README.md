# materialhue

Color utilities for building Material-style color schemes in pure Python,
with no runtime dependencies.

## Modules

- `materialhue.color`: `Argb`, `Rgb`, `LinearRgb`, `Xyz` and `Lab`, with
  conversions between them, hex parsing and formatting, and the luminance
  helpers `y_from_lstar`, `lstar_from_y`, `linearized` and `delinearized`.
  Bad hex strings raise `ParseRGBError` (a `ValueError`).
- `materialhue.contrast`: `ratio_of_tones`, `lighter`, `darker`,
  `lighter_unsafe` and `darker_unsafe`.
- `materialhue.contrast_curve`: `ContrastCurve`, a value that changes with the
  contrast level.
- `materialhue.variant`: `Variant`, the theme styles (`MONOCHROME`, `NEUTRAL`,
  `TONAL_SPOT`, `VIBRANT`, `EXPRESSIVE`, `FIDELITY`, `CONTENT`, `RAINBOW`,
  `FRUIT_SALAD`), ordered as listed.
- `materialhue.dynamic_scheme`: `DynamicScheme`, the UI state a color is
  resolved against, and `get_rotated_hue`.
- `materialhue.tone_delta_pair`: `ToneDeltaPair` and `TonePolarity`.
- `materialhue.foreground`: `foreground_tone`, `enable_light_foreground`,
  `tone_prefers_light_foreground` and `tone_allows_light_foreground`.
- `materialhue.dynamic_color`: `DynamicColor`, a color whose tone adapts to a
  scheme's darkness and contrast level.

## Installation

```
pip install materialhue
```

## Usage

### Parsing and converting colors

```python
from materialhue.color import Argb, ParseRGBError, lstar_from_y, y_from_lstar

red = Argb.from_hex("#ff0000")
print(red.to_hex())            # ff0000
print(red.to_hex_with_pound()) # #ff0000
print(hex(red.to_u32()))       # 0xffff0000

lab = red.to_lab()
print(Argb.from_lab(lab).to_hex())  # a color within a step or so of ff0000

print(red.as_lstar())          # perceptual lightness of the color
print(y_from_lstar(50.0))      # about 18.42
print(lstar_from_y(18.4186518))  # about 50.0

try:
    Argb.from_hex("not a color")
except ParseRGBError as error:
    print(error)               # provided string was not RGB-like
```

`Argb.from_hex` accepts three, six or eight hex digits, with or without a
leading `#`. Three- and six-digit forms get full opacity. `Argb` and `Rgb`
raise `ValueError` for a channel outside 0..255.

### Contrast

```python
from materialhue.contrast import darker, lighter, ratio_of_tones

print(ratio_of_tones(0.0, 100.0))  # 21.0
print(lighter(50.0, 3.0))          # a tone lighter than T50 with a 3:1 ratio
print(darker(10.0, 20.0))          # -1.0: that ratio cannot be reached
```

`lighter` and `darker` return `-1.0` when the ratio cannot be reached or the
tone is outside 0..100. `lighter_unsafe` and `darker_unsafe` fall back to
`100.0` and `0.0` instead.

### Contrast curves

```python
from materialhue.contrast_curve import ContrastCurve

curve = ContrastCurve(low=3.0, normal=4.5, medium=7.0, high=11.0)
print(curve.get(0.0))   # 4.5
print(curve.get(0.25))  # 5.75, halfway between normal and medium
print(curve.get(1.0))   # 11.0
```

### Rotating hues

```python
from materialhue.dynamic_scheme import get_rotated_hue

print(get_rotated_hue(43.0, [0.0, 42.0, 360.0], [0.0, 15.0, 0.0]))  # 58.0
```

A single rotation is always applied; sequences of different lengths raise
`ValueError`.

### Picking foreground tones

```python
from materialhue.foreground import foreground_tone, tone_prefers_light_foreground

print(foreground_tone(90.0, 4.5))          # a dark tone readable on T90
print(tone_prefers_light_foreground(40.0)) # True
```

### Dynamic colors

A `DynamicScheme` takes its palettes as any objects with a `get_hct(tone)`
method; `DynamicColor.get_hct` calls it with the resolved tone and returns
whatever it gives back.

```python
from materialhue.color import Argb
from materialhue.contrast_curve import ContrastCurve
from materialhue.dynamic_color import DynamicColor
from materialhue.dynamic_scheme import DynamicScheme
from materialhue.variant import Variant


class GrayPalette:
    def get_hct(self, tone):
        return Argb.from_lstar(tone)


gray = GrayPalette()
scheme = DynamicScheme(
    source_color_hct=None,
    variant=Variant.TONAL_SPOT,
    is_dark=False,
    primary_palette=gray,
    secondary_palette=gray,
    tertiary_palette=gray,
    neutral_palette=gray,
    neutral_variant_palette=gray,
    error_palette=gray,
)

background = DynamicColor.from_palette(
    "background",
    lambda s: s.neutral_palette,
    lambda s: 6.0 if s.is_dark else 98.0,
)
on_background = DynamicColor(
    "on_background",
    lambda s: s.neutral_palette,
    lambda s: 90.0 if s.is_dark else 10.0,
    background=lambda s: background,
    contrast_curve=ContrastCurve(3.0, 3.0, 4.5, 7.0),
)

print(on_background.get_tone(scheme))  # 10.0
print(on_background.get_hct(scheme))   # the gray at T10
```

`contrast_level` defaults to `0.0` and runs from `-1.0` to `1.0`. A color with
a background but no contrast curve, or with a tone delta pair but no
background, raises `ValueError` when its tone is resolved.

## What this package does not do

It has no HCT color space, no tonal palettes, no ready-made named colors
(primary, surface and so on), no scheme variants that build palettes from a
source color, and no theme or image color extraction. You supply the palettes
and define the `DynamicColor` roles yourself. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```