"""
Hive scales for matplotlib.

A :class:`ScaleSpec` describes how a visual channel (fill or color/stroke)
maps data to Hive colors. Discrete scales carry a palette function
``n -> colors``; continuous scales carry a fixed 256 color gradient. Extra
options are not interpreted here and are forwarded verbatim to the matplotlib
colormap constructor.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

import matplotlib
from matplotlib.colors import Colormap, LinearSegmentedColormap, ListedColormap

from .anchors import HIVE_COLOR_MAP
from .palette import (
    DEFAULT_ALPHA,
    DEFAULT_BEGIN,
    DEFAULT_END,
    DirectionLike,
    PaletteFunction,
    generate_palette,
    make_palette_factory,
)
from .types.color_types import Direction

SCALE_NAME = "hive"
CONTINUOUS_STEPS = 256


class Aesthetic(str, Enum):
    FILL = "fill"
    COLOUR = "colour"


@dataclass(frozen=True)
class ScaleSpec:
    """
    Hive scale for one aesthetic.

    Exactly one of ``palette`` (discrete) and ``colors`` (continuous) is set.
    """
    aesthetic: Aesthetic
    discrete: bool
    palette: Optional[PaletteFunction] = None
    colors: Tuple[str, ...] = ()
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    name: str = SCALE_NAME

    def colors_for(self, n: Optional[int] = None) -> Tuple[str, ...]:
        """
        Colors the scale would draw with.

        Discrete scales need ``n`` (defaults to the number of anchors);
        continuous scales ignore it.
        """
        if self.discrete:
            if self.palette is None:
                raise ValueError("discrete scale has no palette function")
            return tuple(self.palette(len(HIVE_COLOR_MAP) if n is None else n))
        return self.colors

    def to_colormap(self, n: Optional[int] = None) -> Colormap:
        """
        Build the matplotlib colormap for this scale.

        Discrete scales become a ``ListedColormap`` of ``n`` colors, continuous
        ones a ``LinearSegmentedColormap`` through the 256 stored colors.
        ``options`` are passed to the constructor unchanged.
        """
        colors = list(self.colors_for(n))
        if self.discrete:
            return ListedColormap(colors, name=self.name, **self.options)
        return LinearSegmentedColormap.from_list(self.name, colors, **self.options)


def _build_scale(
    aesthetic: Aesthetic,
    discrete: bool,
    alpha: float,
    begin: float,
    end: float,
    direction: DirectionLike,
    options: Optional[Mapping[str, Any]],
    kwargs: Mapping[str, Any],
) -> ScaleSpec:
    merged = MappingProxyType({**(options or {}), **kwargs})
    if discrete:
        return ScaleSpec(
            aesthetic=aesthetic,
            discrete=True,
            palette=make_palette_factory(alpha, begin, end, direction),
            options=merged,
        )
    return ScaleSpec(
        aesthetic=aesthetic,
        discrete=False,
        colors=tuple(generate_palette(CONTINUOUS_STEPS, alpha, begin, end, direction)),
        options=merged,
    )


def fill_scale(
    discrete: bool = False,
    alpha: float = DEFAULT_ALPHA,
    begin: float = DEFAULT_BEGIN,
    end: float = DEFAULT_END,
    direction: DirectionLike = Direction.FORWARD,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> ScaleSpec:
    """
    Hive scale for the fill aesthetic.

    Args:
        discrete: Categorical palette if True, continuous 256 color gradient otherwise.
        alpha, begin, end, direction: As for :func:`~hivecolors.palette.generate_palette`.
        options: Extra colormap constructor arguments; ``kwargs`` are merged on top.
    """
    return _build_scale(Aesthetic.FILL, discrete, alpha, begin, end, direction, options, kwargs)


def color_scale(
    discrete: bool = False,
    alpha: float = DEFAULT_ALPHA,
    begin: float = DEFAULT_BEGIN,
    end: float = DEFAULT_END,
    direction: DirectionLike = Direction.FORWARD,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> ScaleSpec:
    """Hive scale for the color (line/point) aesthetic. See :func:`fill_scale`."""
    return _build_scale(Aesthetic.COLOUR, discrete, alpha, begin, end, direction, options, kwargs)


# Alias for UK spelling
colour_scale = color_scale

scale_fill_hive = fill_scale
scale_color_hive = color_scale
scale_colour_hive = color_scale


def register_colormaps(name: str = SCALE_NAME) -> Tuple[Colormap, Colormap]:
    """
    Register ``name`` and ``name + "_r"`` with ``matplotlib.colormaps``.

    Already registered names are left alone and returned as they are.
    """
    registered = []
    for cmap_name, direction in ((name, Direction.FORWARD), (f"{name}_r", Direction.REVERSED)):
        if cmap_name not in matplotlib.colormaps:
            cmap = LinearSegmentedColormap.from_list(
                cmap_name, generate_palette(CONTINUOUS_STEPS, direction=direction), N=CONTINUOUS_STEPS
            )
            matplotlib.colormaps.register(cmap, name=cmap_name)
        registered.append(matplotlib.colormaps[cmap_name])
    return registered[0], registered[1]
