"""
Cubic interpolating splines.

Two end conditions are supported:

- ``"fmm"`` (Forsythe, Malcolm & Moler): the third derivative at each end
  matches that of the cubic through the four nearest knots. A cubic
  polynomial is reproduced exactly.
- ``"natural"``: zero second derivative at both ends.

Coefficients follow the usual per-interval layout: on ``[x_i, x_{i+1}]``

    s(u) = y_i + dx * (b_i + dx * (c_i + dx * d_i)),   dx = u - x_i

``y`` may carry several channels along its last axis; every channel shares
the knots and is fitted independently.
"""
from __future__ import annotations
from typing import Literal, Tuple
import numpy as np
from numpy import ndarray

SplineMethod = Literal["fmm", "natural"]

Coefficients = Tuple[ndarray, ndarray, ndarray]


def _validate_knots(x: ndarray, y: ndarray) -> None:
    if x.ndim != 1:
        raise ValueError(f"knots must be one dimensional, got shape {x.shape}")
    if y.shape[0] != x.shape[0]:
        raise ValueError(f"expected {x.shape[0]} values, got {y.shape[0]}")
    if x.shape[0] < 2:
        raise ValueError("a spline needs at least two knots")
    if np.any(np.diff(x) <= 0):
        raise ValueError("knots must be strictly increasing")


def _linear_coefficients(x: ndarray, y: ndarray) -> Coefficients:
    slope = (y[1] - y[0]) / (x[1] - x[0])
    b = np.stack([slope, slope])
    zeros = np.zeros_like(b)
    return b, zeros, zeros.copy()


def fmm_spline_coefficients(x: ndarray, y: ndarray) -> Coefficients:
    """
    Fit a cubic spline with Forsythe-Malcolm-Moler end conditions.

    Args:
        x: Strictly increasing knots, shape (n,)
        y: Values at the knots, shape (n,) or (n, channels)

    Returns:
        ``(b, c, d)`` arrays with the same shape as ``y``.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    _validate_knots(x, y)

    n = x.shape[0]
    if n < 3:
        return _linear_coefficients(x, y)

    # Broadcast knot spacings against the channel axes of y
    extra = (1,) * (y.ndim - 1)
    h = np.diff(x)
    slopes = np.diff(y, axis=0) / h.reshape((-1,) + extra)

    nm1 = n - 1
    b = np.empty_like(y)   # diagonal
    c = np.empty_like(y)   # right hand side, later the second-derivative terms
    d = np.empty_like(y)   # off diagonal, later cubic coefficients
    off = np.empty((n,) + extra)
    off[:-1] = h.reshape((-1,) + extra)

    diag = np.empty((n,) + extra)
    diag[1:nm1] = 2 * (off[:nm1 - 1] + off[1:nm1])
    c[1:nm1] = slopes[1:] - slopes[:-1]

    diag[0] = -off[0]
    diag[nm1] = -off[n - 2]
    c[0] = 0.0
    c[nm1] = 0.0
    if n > 3:
        c0 = c[2] / (x[3] - x[1]) - c[1] / (x[2] - x[0])
        cn = c[n - 2] / (x[nm1] - x[n - 3]) - c[n - 3] / (x[n - 2] - x[n - 4])
        c[0] = c0 * off[0] * off[0] / (x[3] - x[0])
        c[nm1] = -cn * off[n - 2] * off[n - 2] / (x[nm1] - x[n - 4])

    diag = np.broadcast_to(diag, y.shape).copy()
    # Forward elimination
    for i in range(1, n):
        t = off[i - 1] / diag[i - 1]
        diag[i] = diag[i] - t * off[i - 1]
        c[i] = c[i] - t * c[i - 1]

    # Back substitution
    c[nm1] = c[nm1] / diag[nm1]
    for i in range(n - 2, -1, -1):
        c[i] = (c[i] - off[i] * c[i + 1]) / diag[i]

    b[nm1] = slopes[-1] + off[n - 2] * (c[n - 2] + 2 * c[nm1])
    b[:nm1] = slopes - off[:nm1] * (c[1:] + 2 * c[:nm1])
    d[:nm1] = (c[1:] - c[:nm1]) / off[:nm1]
    c = 3 * c
    d[nm1] = d[n - 2]
    return b, c, d


def natural_spline_coefficients(x: ndarray, y: ndarray) -> Coefficients:
    """Fit a cubic spline with zero second derivative at both ends."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    _validate_knots(x, y)

    n = x.shape[0]
    if n < 3:
        return _linear_coefficients(x, y)

    extra = (1,) * (y.ndim - 1)
    h = np.diff(x).reshape((-1,) + extra)
    slopes = np.diff(y, axis=0) / h

    # Tridiagonal system for the interior second-derivative terms
    nm1 = n - 1
    diag = np.broadcast_to(2 * (h[:-1] + h[1:]), (nm1 - 1,) + y.shape[1:]).copy()
    rhs = slopes[1:] - slopes[:-1]
    for i in range(1, nm1 - 1):
        t = h[i] / diag[i - 1]
        diag[i] = diag[i] - t * h[i]
        rhs[i] = rhs[i] - t * rhs[i - 1]

    sigma = np.zeros_like(y)
    sigma[nm1 - 1] = rhs[-1] / diag[-1]
    for i in range(nm1 - 3, -1, -1):
        sigma[i + 1] = (rhs[i] - h[i + 1] * sigma[i + 2]) / diag[i]

    b = np.empty_like(y)
    d = np.empty_like(y)
    b[:nm1] = slopes - h * (sigma[1:] + 2 * sigma[:nm1])
    d[:nm1] = (sigma[1:] - sigma[:nm1]) / h
    b[nm1] = slopes[-1] + h[-1] * (sigma[n - 2] + 2 * sigma[nm1])
    d[nm1] = 0.0
    return b, 3 * sigma, d


_FITTERS = {
    "fmm": fmm_spline_coefficients,
    "natural": natural_spline_coefficients,
}


class CubicSpline:
    """
    Callable cubic spline through ``(x, y)``.

    Evaluation outside ``[x_0, x_{n-1}]`` extends the end polynomials.
    """

    def __init__(self, x: ndarray, y: ndarray, method: SplineMethod = "fmm") -> None:
        if method not in _FITTERS:
            raise ValueError(f"Unknown spline method: {method!r}")
        self.x = np.asarray(x, dtype=float)
        self.y = np.asarray(y, dtype=float)
        self.method = method
        self.b, self.c, self.d = _FITTERS[method](self.x, self.y)

    def __call__(self, u: ndarray | float) -> ndarray:
        u = np.asarray(u, dtype=float)
        flat = u.reshape(-1)
        # x[i] <= u < x[i+1]; u at or past the last knot uses the last knot
        idx = np.clip(np.searchsorted(self.x, flat, side="right") - 1, 0, self.x.shape[0] - 1)
        dx = flat - self.x[idx]
        extra = (1,) * (self.y.ndim - 1)
        dx = dx.reshape((-1,) + extra)
        out = self.y[idx] + dx * (self.b[idx] + dx * (self.c[idx] + dx * self.d[idx]))
        return out.reshape(u.shape + self.y.shape[1:])
