"""The Hive anchor colors, from deep blue through green and yellow to red."""
from typing import Tuple

from .colors import parse_hex

HIVE_COLOR_MAP: Tuple[str, ...] = (
    "#003366",
    "#006699",
    "#3399CC",
    "#66CC99",
    "#99CC33",
    "#FFCC00",
    "#FF6600",
    "#CC3300",
)

HIVE_ANCHORS_RGB: Tuple[Tuple[int, int, int], ...] = tuple(
    parse_hex(color) for color in HIVE_COLOR_MAP  # type: ignore[misc]
)
