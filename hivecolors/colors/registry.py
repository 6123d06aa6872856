from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .lab import lab_tuple_to_class
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {**rgb_tuple_to_class, **lab_tuple_to_class}


def color_class_for(space: ColorSpace | str, format_type: FormatType | str) -> type[ColorBase]:
    """Look up the color class for a (space, format) pair."""
    space = ColorSpace(space.lower())
    format_type = FormatType(format_type)
    if space in (ColorSpace.LAB, ColorSpace.XYZ):
        # Absolute spaces only exist as floats
        format_type = FormatType.FLOAT
    try:
        return unified_tuple_to_class[(space, format_type)]
    except KeyError:
        raise ValueError(f"No color class for space={space.value!r}, format={format_type.value!r}") from None
