"""CIE XYZ <-> CIE L*a*b* conversions (CIE 1976, exact epsilon/kappa)."""
from __future__ import annotations
import numpy as np
from numpy import ndarray

from .whitepoint import D65_WHITE

EPSILON = 216 / 24389
KAPPA = 24389 / 27


def np_xyz_to_lab(x: ndarray, y: ndarray, z: ndarray, white: ndarray = D65_WHITE) -> ndarray:
    xyz_r = np.stack([np.asarray(x), np.asarray(y), np.asarray(z)], axis=-1) / white
    f = np.where(xyz_r <= EPSILON, (KAPPA * xyz_r + 16) / 116, np.cbrt(xyz_r))
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(L: ndarray, a: ndarray, b: ndarray, white: ndarray = D65_WHITE) -> ndarray:
    L = np.asarray(L, dtype=float)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    yr = np.where(L < KAPPA * EPSILON, L / KAPPA, ((L + 16) / 116) ** 3)
    fy = np.where(yr <= EPSILON, (KAPPA * yr + 16) / 116, (L + 16) / 116)
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = np.where(fx ** 3 <= EPSILON, (116 * fx - 16) / KAPPA, fx ** 3)
    zr = np.where(fz ** 3 <= EPSILON, (116 * fz - 16) / KAPPA, fz ** 3)
    return np.stack([xr, yr, zr], axis=-1) * white
