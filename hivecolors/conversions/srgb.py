"""
sRGB <-> CIE XYZ conversions.

The RGB -> XYZ matrix is derived from the sRGB primaries and the D65 white
point rather than hard-coded, so the forward and inverse transforms are
exact inverses of each other.
"""
from __future__ import annotations
import numpy as np
from numpy import ndarray

from .whitepoint import D65_XY, xy_to_xyz

SRGB_PRIMARIES_XY = {
    "red": (0.64, 0.33),
    "green": (0.30, 0.60),
    "blue": (0.15, 0.06),
}

# Piecewise sRGB transfer function constants (IEC 61966-2-1)
_DECODE_THRESHOLD = 0.04045
_ENCODE_THRESHOLD = 0.0031308
_LINEAR_SLOPE = 12.92
_GAMMA = 2.4
_OFFSET = 0.055


def rgb_to_xyz_matrix(
    primaries: dict[str, tuple[float, float]] = SRGB_PRIMARIES_XY,
    white: tuple[float, float] = D65_XY,
) -> ndarray:
    """
    Build the 3x3 matrix ``M`` such that ``xyz = linear_rgb @ M``.

    Each primary's chromaticity is lifted to XYZ at ``Y = 1`` and scaled so
    that RGB ``(1, 1, 1)`` lands on the white point.
    """
    cols = np.column_stack([
        xy_to_xyz(primaries["red"]),
        xy_to_xyz(primaries["green"]),
        xy_to_xyz(primaries["blue"]),
    ])
    scale = np.linalg.solve(cols, xy_to_xyz(white))
    return (cols * scale).T


RGB_TO_XYZ = rgb_to_xyz_matrix()
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)


def srgb_decode(values: ndarray) -> ndarray:
    """Gamma-encoded unit sRGB -> linear light."""
    v = np.asarray(values, dtype=float)
    high = ((np.maximum(v, _DECODE_THRESHOLD) + _OFFSET) / (1 + _OFFSET)) ** _GAMMA
    return np.where(v <= _DECODE_THRESHOLD, v / _LINEAR_SLOPE, high)


def srgb_encode(values: ndarray) -> ndarray:
    """Linear light -> gamma-encoded unit sRGB (no clipping)."""
    v = np.asarray(values, dtype=float)
    high = (1 + _OFFSET) * np.maximum(v, _ENCODE_THRESHOLD) ** (1 / _GAMMA) - _OFFSET
    return np.where(v <= _ENCODE_THRESHOLD, _LINEAR_SLOPE * v, high)


def np_unit_rgb_to_xyz(r: ndarray, g: ndarray, b: ndarray) -> ndarray:
    """Vectorized unit sRGB -> XYZ (D65, ``Y`` of white = 1)."""
    rgb = np.stack([np.asarray(r), np.asarray(g), np.asarray(b)], axis=-1)
    return srgb_decode(rgb) @ RGB_TO_XYZ


def np_xyz_to_unit_rgb(x: ndarray, y: ndarray, z: ndarray) -> ndarray:
    """Vectorized XYZ -> unit sRGB. Out of gamut values are not clipped here."""
    xyz = np.stack([np.asarray(x), np.asarray(y), np.asarray(z)], axis=-1)
    return srgb_encode(xyz @ XYZ_TO_RGB)
