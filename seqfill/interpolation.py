"""
One-dimensional interpolation backend.

Thin layer over scipy.interpolate giving every kernel the same call shape:
fit on sample points, evaluate at query points. Boundary behavior follows
the classic interp1 convention: 'nearest' and 'linear' return NaN outside
the sample range, the cubic kernels extrapolate.
"""

import numpy as np
from scipy import interpolate as sp_interpolate

from .policies import Kernel


# interp1d rather than make_interp_spline or np.interp: it returns NaN outside
# the sample range instead of extrapolating or clamping.


def _nearest(x: np.ndarray, y: np.ndarray):
    # Ties go to the upper sample
    return sp_interpolate.interp1d(
        x, y, kind="nearest-up", bounds_error=False, fill_value=np.nan, assume_sorted=True
    )


def _linear(x: np.ndarray, y: np.ndarray):
    return sp_interpolate.interp1d(
        x, y, kind="linear", bounds_error=False, fill_value=np.nan, assume_sorted=True
    )


def _spline(x: np.ndarray, y: np.ndarray):
    return sp_interpolate.CubicSpline(x, y, bc_type="not-a-knot", extrapolate=True)


def _pchip(x: np.ndarray, y: np.ndarray):
    return sp_interpolate.PchipInterpolator(x, y, extrapolate=True)


INTERPOLANTS = {
    Kernel.NEAREST: _nearest,
    Kernel.LINEAR: _linear,
    Kernel.SPLINE: _spline,
    Kernel.PCHIP: _pchip,
    Kernel.CUBIC: _pchip,
}


def interpolate(
    sample_x: np.ndarray, sample_y: np.ndarray, query_x: np.ndarray, kernel: Kernel
) -> np.ndarray:
    """
    Evaluate a 1-D interpolant of (sample_x, sample_y) at query_x.

    Parameters
    ----------
    sample_x : np.ndarray
        Sample coordinates, any order
    sample_y : np.ndarray
        Sample values, same length as sample_x
    query_x : np.ndarray
        Coordinates to evaluate at
    kernel : Kernel
        Interpolation kernel

    Returns
    -------
    np.ndarray
        Interpolated values, one per query point (float)

    Notes
    -----
    Errors raised by scipy (too few samples for the kernel, repeated
    coordinates for the spline kernels, ...) are not caught.
    """
    sample_x = np.asarray(sample_x, dtype=float).ravel()
    sample_y = np.asarray(sample_y, dtype=float).ravel()
    query_x = np.asarray(query_x, dtype=float).ravel()

    if query_x.size == 0:
        return np.empty(0, dtype=float)

    order = np.argsort(sample_x, kind="stable")
    fitted = INTERPOLANTS[kernel](sample_x[order], sample_y[order])
    return np.asarray(fitted(query_x), dtype=float)
