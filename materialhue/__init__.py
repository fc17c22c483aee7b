"""Material color utilities: color spaces, contrast math and dynamic color resolution."""

__version__ = "0.4.2"

__all__ = [
    "color",
    "contrast",
    "contrast_curve",
    "variant",
    "dynamic_scheme",
    "tone_delta_pair",
    "foreground",
    "dynamic_color",
]