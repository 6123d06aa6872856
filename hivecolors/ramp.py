"""
Color ramps: continuous maps from ``t in [0, 1]`` to colors through a list of
anchor colors.
"""
from __future__ import annotations
from typing import Literal, Sequence, Union
import numpy as np
from numpy import ndarray
from boundednumbers import BoundType, bound_type_to_np_function

from .colors import ColorBase, ColorUnitRGB, ColorRGBINT
from .conversions import np_convert, FormatType
from .interpolation import CubicSpline

RampSpace = Literal["lab", "rgb"]
RampInterpolation = Literal["spline", "linear"]
AnchorLike = Union[str, Sequence[int], ColorBase]


def anchors_to_unit_rgb(colors: Sequence[AnchorLike]) -> ndarray:
    """
    Normalize anchors to an ``(n, 3)`` unit RGB array.

    Strings are parsed as hex, sequences as 0-255 integer RGB and color
    objects are converted. Alpha is dropped.
    """
    rows = []
    for color in colors:
        if isinstance(color, str):
            unit = ColorUnitRGB.from_hex(color)
        elif isinstance(color, ColorBase):
            unit = ColorUnitRGB(color)
        else:
            unit = ColorUnitRGB(ColorRGBINT(tuple(color)))
        rows.append(unit.value)
    return np.array(rows, dtype=float).reshape(-1, 3)


class ColorRamp:
    """
    Interpolating ramp through ``colors``, evenly spaced over ``[0, 1]``.

    Args:
        colors: Two or more anchor colors.
        space: "lab" interpolates in CIE Lab, "rgb" in gamma-encoded sRGB.
        interpolate: "spline" (FMM cubic spline per channel) or "linear".

    Calling the ramp with an array of ``t`` returns unit RGB rows clipped to
    ``[0, 1]``.
    """

    def __init__(
        self,
        colors: Sequence[AnchorLike],
        space: RampSpace = "lab",
        interpolate: RampInterpolation = "spline",
    ) -> None:
        if len(colors) < 2:
            raise ValueError("need at least two colors to build a ramp")
        if space not in ("lab", "rgb"):
            raise ValueError(f"Unknown ramp space: {space!r}")
        if interpolate not in ("spline", "linear"):
            raise ValueError(f"Unknown interpolation: {interpolate!r}")

        self.space = space
        self.interpolate = interpolate
        self.anchors = anchors_to_unit_rgb(colors)
        self.knots = np.linspace(0.0, 1.0, self.anchors.shape[0])

        values = self.anchors
        if space == "lab":
            values = np_convert(values, "rgb", "lab", FormatType.FLOAT, FormatType.FLOAT)
        self._values = values
        self._spline = CubicSpline(self.knots, values, method="fmm") if interpolate == "spline" else None

    def _evaluate(self, t: ndarray) -> ndarray:
        if self._spline is not None:
            return self._spline(t)
        return np.column_stack([
            np.interp(t, self.knots, self._values[:, ch])
            for ch in range(self._values.shape[1])
        ])

    def __call__(self, t: ndarray | float | Sequence[float]) -> ndarray:
        t = np.atleast_1d(np.asarray(t, dtype=float))
        values = self._evaluate(t.reshape(-1))
        if self.space == "lab":
            values = np_convert(values, "lab", "rgb", FormatType.FLOAT, FormatType.FLOAT)
        clipped = bound_type_to_np_function[BoundType.CLAMP](values, 0.0, 1.0)
        return np.asarray(clipped).reshape(t.shape + (3,))

    def __len__(self) -> int:
        return self.anchors.shape[0]
