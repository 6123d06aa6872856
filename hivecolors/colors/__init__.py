from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    RGB,
    RGBA,
)
from .lab import ColorLab, ColorXYZ
from .registry import unified_tuple_to_class, color_class_for
from .hex import parse_hex, format_hex

__all__ = [
    "ColorBase",
    "WithAlpha",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "RGB",
    "RGBA",
    "ColorLab",
    "ColorXYZ",
    "unified_tuple_to_class",
    "color_class_for",
    "parse_hex",
    "format_hex",
]
