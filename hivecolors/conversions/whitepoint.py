from __future__ import annotations
import numpy as np
from numpy import ndarray

# CIE 1931 2 degree chromaticities
D65_XY = (0.3127, 0.3290)


def xy_to_xyz(xy: tuple[float, float]) -> ndarray:
    """Lift an ``(x, y)`` chromaticity to XYZ with ``Y = 1``."""
    x, y = xy
    return np.array([x / y, 1.0, (1.0 - x - y) / y])


D65_WHITE = xy_to_xyz(D65_XY)
