"""
Hive palette generation.

The anchors in :data:`~hivecolors.anchors.HIVE_COLOR_MAP` are converted to
CIE Lab and joined by a cubic spline per channel; a palette of ``n`` colors
samples that curve at evenly spaced points between ``begin`` and ``end``.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, List, Union, cast
import math
import operator
import warnings
import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from .anchors import HIVE_COLOR_MAP
from .colors import ColorUnitRGB, ColorUnitRGBA
from .errors import InvalidRangeError
from .ramp import ColorRamp
from .types.color_types import ColorSpace, Direction

DEFAULT_ALPHA = 1.0
DEFAULT_BEGIN = 0.0
DEFAULT_END = 1.0

DirectionLike = Union[Direction, int, str]
PaletteFunction = Callable[[int], List[str]]

HIVE_RAMP = ColorRamp(HIVE_COLOR_MAP, space="lab", interpolate="spline")


def _check_unit_range(begin: float, end: float) -> None:
    # Written so that NaN fails too
    if not (0.0 <= begin <= 1.0 and 0.0 <= end <= 1.0):
        raise InvalidRangeError(f"begin and end must be within [0, 1], got begin={begin!r}, end={end!r}")


def _resolve_alpha(alpha: float, stacklevel: int) -> float:
    alpha = float(alpha)
    if math.isnan(alpha):
        raise ValueError("alpha must be a number, got NaN")
    if not 0.0 <= alpha <= 1.0:
        warnings.warn(f"alpha={alpha!r} is outside [0, 1] and will be clamped", UserWarning, stacklevel=stacklevel)
        alpha = clamp(alpha, 0.0, 1.0)
    return alpha


@dataclass(frozen=True)
class PaletteRequest:
    """
    Parameters of one palette.

    Attributes:
        n: Number of colors; ``n <= 0`` yields an empty palette.
        alpha: Opacity applied to every color, 0 (transparent) to 1 (opaque).
        begin: Start of the sampled sub-range of the anchor path, in ``[0, 1]``.
        end: End of the sampled sub-range, in ``[0, 1]``. ``begin > end`` is allowed.
        direction: ``Direction.FORWARD`` (1) or ``Direction.REVERSED`` (-1);
            reversing swaps ``begin`` and ``end``.
    """
    n: int
    alpha: float = DEFAULT_ALPHA
    begin: float = DEFAULT_BEGIN
    end: float = DEFAULT_END
    direction: DirectionLike = Direction.FORWARD

    @property
    def is_empty(self) -> bool:
        return operator.index(self.n) <= 0

    def validated(self) -> PaletteRequest:
        """
        Check the range and direction; returns a copy with a parsed ``Direction``.

        Raises:
            TypeError: ``n`` is not an integer.
            InvalidRangeError: ``begin`` or ``end`` outside ``[0, 1]``.
            InvalidDirectionError: unrecognized ``direction``.
        """
        n = operator.index(self.n)
        _check_unit_range(self.begin, self.end)
        direction = Direction.parse(self.direction)
        return replace(self, n=n, direction=direction)

    def sample_points(self) -> ndarray:
        """Spline parameters for each output color, in output order."""
        request = self.validated()
        if request.n <= 0:
            return np.empty(0)
        begin, end = request.begin, request.end
        if request.direction is Direction.REVERSED:
            begin, end = end, begin
        return np.linspace(begin, end, request.n)


def _palette_rgba(request: PaletteRequest) -> ColorUnitRGBA | None:
    if request.is_empty:
        return None
    t = request.sample_points()
    # generate_palette -> _palette_rgba -> _resolve_alpha
    alpha = _resolve_alpha(request.alpha, stacklevel=4)
    opaque = ColorUnitRGB(HIVE_RAMP(t)).convert(ColorSpace.RGBA)
    return cast(ColorUnitRGBA, opaque).with_alpha(alpha)


def hive_colors_array(
    n: int,
    alpha: float = DEFAULT_ALPHA,
    begin: float = DEFAULT_BEGIN,
    end: float = DEFAULT_END,
    direction: DirectionLike = Direction.FORWARD,
) -> ndarray:
    """Same as :func:`generate_palette` but returns an ``(n, 4)`` unit RGBA array."""
    colors = _palette_rgba(PaletteRequest(n, alpha, begin, end, direction))
    if colors is None:
        return np.empty((0, 4))
    return np.asarray(colors.value)


def generate_palette(
    n: int,
    alpha: float = DEFAULT_ALPHA,
    begin: float = DEFAULT_BEGIN,
    end: float = DEFAULT_END,
    direction: DirectionLike = Direction.FORWARD,
) -> List[str]:
    """
    Generate ``n`` colors interpolated along the Hive color map.

    Args:
        n: Number of colors. Zero or negative returns an empty list.
        alpha: Transparency, 0 (transparent) to 1 (opaque). Values outside
            ``[0, 1]`` are clamped with a ``UserWarning``.
        begin: Fractional start point along the palette (0 = first anchor).
        end: Fractional end point along the palette (1 = last anchor).
        direction: 1 / ``"forward"`` (default) or -1 / ``"reversed"``.

    Returns:
        List of ``"#RRGGBBAA"`` strings.

    Raises:
        InvalidRangeError: ``begin`` or ``end`` outside ``[0, 1]``.
        InvalidDirectionError: ``direction`` not recognized.

    Example:
        >>> generate_palette(3)[0]
        '#003366FF'
    """
    colors = _palette_rgba(PaletteRequest(n, alpha, begin, end, direction))
    if colors is None:
        return []
    return list(colors.to_hex())


def make_palette_factory(
    alpha: float = DEFAULT_ALPHA,
    begin: float = DEFAULT_BEGIN,
    end: float = DEFAULT_END,
    direction: DirectionLike = Direction.FORWARD,
) -> PaletteFunction:
    """
    Return ``n -> generate_palette(n, alpha, begin, end, direction)``.

    Range, direction and alpha are checked once, up front, so an
    out-of-range alpha warns here rather than on every call.
    """
    _check_unit_range(begin, end)
    direction = Direction.parse(direction)
    alpha = _resolve_alpha(alpha, stacklevel=3)

    def palette(n: int) -> List[str]:
        return generate_palette(n, alpha=alpha, begin=begin, end=end, direction=direction)

    return palette


hive_colors = generate_palette
hive_palette = make_palette_factory
