"""Palette swatches rendered with Pillow."""
from __future__ import annotations
from pathlib import Path
from typing import Any, Sequence, Union

import numpy as np
from PIL import Image

from .colors import ColorRGBAINT
from .palette import generate_palette


def palette_swatch(colors: Sequence[str], width: int = 32, height: int = 32) -> Image.Image:
    """
    Render ``colors`` side by side, one ``width`` x ``height`` block each.

    Args:
        colors: Hex strings (``#RRGGBB`` or ``#RRGGBBAA``).
        width: Block width in pixels.
        height: Image height in pixels.

    Returns:
        RGBA image of size ``(len(colors) * width, height)``.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if not colors:
        raise ValueError("colors must contain at least one color")

    rgba = np.array([ColorRGBAINT.from_hex(c).value for c in colors], dtype=np.uint8)
    strip = np.repeat(rgba[np.newaxis, :, :], width, axis=1)
    pixels = np.repeat(strip, height, axis=0)
    return Image.fromarray(pixels)


def save_swatch(path: Union[str, Path], n: int, width: int = 32, height: int = 32, **request: Any) -> Path:
    """Write a PNG swatch of ``generate_palette(n, **request)`` to ``path``."""
    path = Path(path)
    palette_swatch(generate_palette(n, **request), width=width, height=height).save(path, format="PNG")
    return path
