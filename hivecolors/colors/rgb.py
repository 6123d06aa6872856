from __future__ import annotations
from typing import ClassVar, List, Tuple, Union
import numpy as np
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry
from .hex import parse_hex, format_hex


class _HexMixin:
    """``#RRGGBB[AA]`` round trips for RGB classes."""

    mode: ClassVar[ColorSpace]
    format_type: ClassVar[FormatType]

    @classmethod
    def from_hex(cls, text: str):
        channels = parse_hex(text)
        source = ColorRGBAINT if len(channels) == 4 else ColorRGBINT
        return cls(source(channels))  # type: ignore[call-arg]

    def to_hex(self) -> Union[str, List[str]]:
        """Hex string for a single color, list of strings for arrays."""
        ints = self if self.format_type == FormatType.INT else self.convert(self.mode, FormatType.INT)  # type: ignore[attr-defined]
        if ints.is_array:
            flat = np.asarray(ints.value).reshape(-1, ints.num_channels)
            return [format_hex(row) for row in flat]
        return format_hex(ints.value)


class ColorRGBINT(_HexMixin, ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(_HexMixin, ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.RGBA
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT
    alpha_max: ClassVar[int] = 255


class ColorUnitRGB(_HexMixin, ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(_HexMixin, ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.RGBA
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    alpha_max: ClassVar[float] = 1.0


class ColorPercentageRGB(_HexMixin, ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[float, float, float]] = (100.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


class ColorPercentageRGBA(_HexMixin, ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.RGBA
    maxima: ClassVar[Tuple[float, float, float, float]] = (100.0, 100.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    alpha_max: ClassVar[float] = 100.0


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
