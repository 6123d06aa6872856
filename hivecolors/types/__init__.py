from .format_type import FormatType, channel_max, format_classes, default_format_dtypes, format_valid_dtypes
from .color_types import (
    ColorSpace,
    ColorElement,
    ColorValue,
    Scalar,
    ScalarVector,
    Direction,
    element_to_array,
    has_alpha_channel,
)

__all__ = [
    "FormatType",
    "channel_max",
    "format_classes",
    "default_format_dtypes",
    "format_valid_dtypes",
    "ColorSpace",
    "ColorElement",
    "ColorValue",
    "Scalar",
    "ScalarVector",
    "Direction",
    "element_to_array",
    "has_alpha_channel",
]
