from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

from ..errors import InvalidDirectionError

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]
ColorValue = Union[ColorElement, ndarray]  # Includes array support


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    XYZ = "xyz"
    LAB = "lab"


ALPHA_SPACES = {ColorSpace.RGBA}


class Direction(int, Enum):
    """Traversal direction along the anchor sequence."""
    FORWARD = 1
    REVERSED = -1

    @classmethod
    def parse(cls, value: Union["Direction", int, str]) -> "Direction":
        """
        Resolve a direction given as enum member, ``1``/``-1`` (also as the
        strings ``"1"``/``"-1"``) or name.

        Raises:
            InvalidDirectionError: for anything else, including ``0`` and booleans.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            if key in ("1", "-1"):
                return cls(int(key))
            try:
                return cls[key.upper()]
            except KeyError:
                pass
        elif not isinstance(value, bool):
            try:
                return cls(value)
            except (ValueError, TypeError):
                pass
        raise InvalidDirectionError(
            f"direction must be either 1 (forward) or -1 (reversed), got {value!r}"
        )


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.
    
    Args:
        element: Scalar, tuple, or already an ndarray
        
    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element])
    return np.array(element)

def has_alpha_channel(color_space: ColorSpace | str) -> bool:
    """Check if the given color space carries a trailing alpha channel."""
    return ColorSpace(color_space.lower()) in ALPHA_SPACES
