"""
hivecolors color space conversions
==================================

Vectorized conversions between gamma-encoded sRGB, CIE XYZ and CIE L*a*b*.
All functions take the channels as separate arrays and return an array whose
last axis holds the converted channels.

Conversion Functions
-------------------

sRGB <-> XYZ:
    np_unit_rgb_to_xyz(r, g, b)
    np_xyz_to_unit_rgb(x, y, z)
        Unit (0-1) sRGB, D65 white, ``Y`` of white = 1.
        The inverse does not clip out of gamut values.

XYZ <-> Lab:
    np_xyz_to_lab(x, y, z, white=D65_WHITE)
    np_lab_to_xyz(L, a, b, white=D65_WHITE)

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
        Single color (tuple) converter with format handling
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized converter

Formats only apply to RGB channels and alpha: INT (0-255), FLOAT (0-1),
PERCENTAGE (0-100). XYZ and Lab values are always absolute floats.

Examples
--------
>>> from hivecolors.conversions import convert, FormatType
>>> L, a, b = convert((255, 255, 255), "rgb", "lab", FormatType.INT, FormatType.FLOAT)
>>> round(L, 6)
100.0
"""

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .whitepoint import D65_XY, D65_WHITE, xy_to_xyz
from .srgb import (
    RGB_TO_XYZ,
    XYZ_TO_RGB,
    rgb_to_xyz_matrix,
    srgb_decode,
    srgb_encode,
    np_unit_rgb_to_xyz,
    np_xyz_to_unit_rgb,
)
from .lab import np_xyz_to_lab, np_lab_to_xyz
from .wrapper import convert, np_convert

__all__ = [
    "FormatType",
    "ColorSpace",
    "D65_XY",
    "D65_WHITE",
    "xy_to_xyz",
    "RGB_TO_XYZ",
    "XYZ_TO_RGB",
    "rgb_to_xyz_matrix",
    "srgb_decode",
    "srgb_encode",
    "np_unit_rgb_to_xyz",
    "np_xyz_to_unit_rgb",
    "np_xyz_to_lab",
    "np_lab_to_xyz",
    "convert",
    "np_convert",
]
