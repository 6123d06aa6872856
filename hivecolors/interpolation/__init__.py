from .spline import (
    CubicSpline,
    SplineMethod,
    fmm_spline_coefficients,
    natural_spline_coefficients,
)

__all__ = [
    "CubicSpline",
    "SplineMethod",
    "fmm_spline_coefficients",
    "natural_spline_coefficients",
]
