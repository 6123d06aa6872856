"""
hivecolors - the Hive color palette
===================================

A palette of eight anchor colors running from deep blue through teal, green
and yellow to red, interpolated in CIE Lab with a cubic spline so it can be
sampled at any length for discrete or continuous scales.

Quick Start
-----------
>>> from hivecolors import generate_palette, make_palette_factory, fill_scale
>>> generate_palette(3)                       # doctest: +SKIP
['#003366FF', ..., '#CC3300FF']
>>> palette = make_palette_factory(alpha=0.5, direction=-1)
>>> len(palette(5))
5
>>> cmap = fill_scale(discrete=False).to_colormap()   # doctest: +SKIP

Modules
-------
- palette: ``generate_palette`` / ``hive_colors`` and the palette factory
- scales: fill and color scales, matplotlib colormaps and registration
- ramp: general purpose Lab/RGB color ramps
- interpolation: cubic splines (FMM and natural end conditions)
- colors: immutable RGB/RGBA/Lab color values with hex support
- conversions: sRGB <-> XYZ <-> Lab conversions
- preview: palette swatches as Pillow images
"""

from .anchors import HIVE_COLOR_MAP, HIVE_ANCHORS_RGB
from .errors import HiveColorError, InvalidRangeError, InvalidDirectionError
from .types import Direction, FormatType, ColorSpace
from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    ColorLab,
    ColorXYZ,
)
from .conversions import convert, np_convert
from .interpolation import CubicSpline
from .ramp import ColorRamp
from .palette import (
    PaletteRequest,
    generate_palette,
    hive_colors,
    hive_colors_array,
    make_palette_factory,
    hive_palette,
)
from .scales import (
    Aesthetic,
    ScaleSpec,
    fill_scale,
    color_scale,
    colour_scale,
    scale_fill_hive,
    scale_color_hive,
    scale_colour_hive,
    register_colormaps,
)
from .preview import palette_swatch, save_swatch

__version__ = "1.0.0"

__all__ = [
    # Anchors
    "HIVE_COLOR_MAP",
    "HIVE_ANCHORS_RGB",

    # Errors
    "HiveColorError",
    "InvalidRangeError",
    "InvalidDirectionError",

    # Types
    "Direction",
    "FormatType",
    "ColorSpace",

    # Color classes
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "ColorLab",
    "ColorXYZ",

    # Conversions and interpolation
    "convert",
    "np_convert",
    "CubicSpline",
    "ColorRamp",

    # Palettes
    "PaletteRequest",
    "generate_palette",
    "hive_colors",
    "hive_colors_array",
    "make_palette_factory",
    "hive_palette",

    # Scales
    "Aesthetic",
    "ScaleSpec",
    "fill_scale",
    "color_scale",
    "colour_scale",
    "scale_fill_hive",
    "scale_color_hive",
    "scale_colour_hive",
    "register_colormaps",

    # Preview
    "palette_swatch",
    "save_swatch",

    # Version
    "__version__",
]
