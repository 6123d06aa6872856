"""Hex color string parsing and formatting (``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``)."""
from __future__ import annotations
from typing import Iterable, Tuple
import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex(text: str) -> Tuple[int, ...]:
    """
    Parse a hex color into integer channels.

    Returns three channels for ``#RGB``/``#RRGGBB`` and four for ``#RRGGBBAA``.

    Raises:
        ValueError: if ``text`` is not a hex color.
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))


def format_hex(channels: Iterable[int]) -> str:
    return "#" + "".join(f"{int(c):02X}" for c in channels)

