"""Color representations and conversions between sRGB, linear RGB, XYZ and L*a*b*."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

SRGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: tuple[tuple[float, float, float], ...] = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65: tuple[float, float, float] = (95.047, 100.0, 108.883)

_HEX_DIGITS = frozenset(string.hexdigits)


class ParseRGBError(ValueError):
    """Raised when a string cannot be parsed as a hex RGB color."""

    def __init__(self, message: str = "provided string was not RGB-like") -> None:
        super().__init__(message)


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


def _multiply(
    matrix: tuple[tuple[float, float, float], ...], vector: tuple[float, float, float]
) -> tuple[float, float, float]:
    x, y, z = vector
    r0, r1, r2 = (row[0] * x + row[1] * y + row[2] * z for row in matrix)
    return r0, r1, r2


@dataclass(frozen=True)
class Rgb:
    """An opaque color given by 8-bit red, green and blue channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)


@dataclass(frozen=True)
class LinearRgb:
    """A color in linear RGB space, channels from 0 to 100."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0


@dataclass(frozen=True)
class Xyz:
    """A color in CIE XYZ space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Lab:
    """A color in CIE L*a*b* space."""

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0


@dataclass(frozen=True, order=True)
class Argb:
    """A color given by 8-bit alpha, red, green and blue channels."""

    alpha: int = 0
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        _check_channel("alpha", self.alpha)
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)

    @classmethod
    def from_u32(cls, value: int) -> Argb:
        """Build a color from a packed 0xAARRGGBB integer."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @classmethod
    def from_hex(cls, text: str) -> Argb:
        """Parse a hex color of 3, 6 or 8 digits, optionally prefixed by '#'."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (3, 6, 8) or not all(c in _HEX_DIGITS for c in digits):
            raise ParseRGBError()
        if len(digits) == 3:
            digits = "FF" + "".join(c * 2 for c in digits)
        elif len(digits) == 6:
            digits = "FF" + digits
        return cls.from_u32(int(digits, 16))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> Argb:
        """Build an opaque color from RGB channels."""
        return cls(255, rgb.red, rgb.green, rgb.blue)

    @classmethod
    def from_linear_rgb(cls, linear: LinearRgb) -> Argb:
        """Build an opaque color from linear RGB channels."""
        return cls.from_rgb(
            Rgb(
                delinearized(linear.red),
                delinearized(linear.green),
                delinearized(linear.blue),
            )
        )

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Argb:
        """Build an opaque color from XYZ coordinates."""
        linear_r, linear_g, linear_b = _multiply(XYZ_TO_SRGB, (xyz.x, xyz.y, xyz.z))
        return cls.from_linear_rgb(LinearRgb(linear_r, linear_g, linear_b))

    @classmethod
    def from_lab(cls, lab: Lab) -> Argb:
        """Build an opaque color from L*a*b* coordinates."""
        fy = (lab.l + 16.0) / 116.0
        fx = lab.a / 500.0 + fy
        fz = fy - lab.b / 200.0
        wx, wy, wz = WHITE_POINT_D65
        return cls.from_xyz(Xyz(_lab_invf(fx) * wx, _lab_invf(fy) * wy, _lab_invf(fz) * wz))

    @classmethod
    def from_lstar(cls, lstar: float) -> Argb:
        """Build the gray whose lightness matches the given L*."""
        component = delinearized(y_from_lstar(lstar))
        return cls.from_rgb(Rgb(component, component, component))

    def to_u32(self) -> int:
        """Pack the color into a 0xAARRGGBB integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def to_xyz(self) -> Xyz:
        """Convert the color to XYZ coordinates."""
        x, y, z = _multiply(
            SRGB_TO_XYZ,
            (linearized(self.red), linearized(self.green), linearized(self.blue)),
        )
        return Xyz(x, y, z)

    def to_lab(self) -> Lab:
        """Convert the color to L*a*b* coordinates."""
        xyz = self.to_xyz()
        wx, wy, wz = WHITE_POINT_D65
        fx = _lab_f(xyz.x / wx)
        fy = _lab_f(xyz.y / wy)
        fz = _lab_f(xyz.z / wz)
        return Lab(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))

    def as_lstar(self) -> float:
        """Return the L* coordinate of the color."""
        return 116.0 * _lab_f(self.to_xyz().y / 100.0) - 16.0

    def to_hex(self) -> str:
        """Return the RGB channels as six lower-case hex digits."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_hex_with_pound(self) -> str:
        """Return the RGB channels as '#' followed by six hex digits."""
        return "#" + self.to_hex()

    def __str__(self) -> str:
        return self.to_hex_with_pound()


def y_from_lstar(lstar: float) -> float:
    """Convert L* (perceptual luminance) to Y (relative luminance) in XYZ."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert Y (relative luminance) in XYZ to L* (perceptual luminance)."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def linearized(rgb_component: int) -> float:
    """Map an 8-bit sRGB channel to a linear channel from 0 to 100."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """Map a linear channel from 0 to 100 to an 8-bit sRGB channel."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    scaled = value * 255.0
    if math.isnan(scaled):
        return 0
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return int(min(max(rounded, 0.0), 255.0))


def _lab_f(t: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    if t > e:
        return t ** (1.0 / 3.0)
    return (kappa * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    ft3 = ft * ft * ft
    if ft3 > e:
        return ft3
    return (116.0 * ft - 16.0) / kappa