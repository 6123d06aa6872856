from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorLab(ColorBase):
    """CIE L*a*b* (D65). Channels are absolute and never clamped."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.LAB
    maxima: ClassVar[None] = None
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorXYZ(ColorBase):
    """CIE XYZ (D65, ``Y`` of white = 1)."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.XYZ
    maxima: ClassVar[None] = None
    format_type: ClassVar[FormatType] = FormatType.FLOAT


lab_tuple_to_class = build_registry(ColorLab, ColorXYZ)
