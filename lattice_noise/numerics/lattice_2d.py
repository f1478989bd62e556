# ==============================================================================
# File: lattice_noise/numerics/lattice_2d.py
# Purpose: 2D lattice noise over the triangular (2-simplex) tessellation.
# ==============================================================================
from __future__ import annotations
import numpy as np
from numba import njit, prange

from ..core.constants import NORM_CONSTANT_2D, SQUISH_CONSTANT_2D, STRETCH_CONSTANT_2D
from .extrapolate import contribution2


@njit(cache=True)
def extra_vertex_lower(xsb, ysb, dx0, dy0, xins, yins, in_sum):
    """Extra vertex for a point in the triangle at (0,0)."""
    zins = 1 - in_sum
    if zins > xins or zins > yins:
        # (0,0) is one of the closest two triangle vertices
        if xins > yins:
            return xsb + 1, ysb - 1, dx0 - 1, dy0 + 1
        return xsb - 1, ysb + 1, dx0 + 1, dy0 - 1
    # (1,0) and (0,1) are the closest two
    return (xsb + 1, ysb + 1,
            dx0 - 1 - 2 * SQUISH_CONSTANT_2D,
            dy0 - 1 - 2 * SQUISH_CONSTANT_2D)


@njit(cache=True)
def extra_vertex_upper(xsb, ysb, dx0, dy0, xins, yins, in_sum):
    """Extra vertex for a point in the triangle at (1,1)."""
    zins = 2 - in_sum
    if zins < xins or zins < yins:
        if xins > yins:
            return (xsb + 2, ysb,
                    dx0 - 2 - 2 * SQUISH_CONSTANT_2D,
                    dy0 + 0 - 2 * SQUISH_CONSTANT_2D)
        return (xsb, ysb + 2,
                dx0 + 0 - 2 * SQUISH_CONSTANT_2D,
                dy0 - 2 - 2 * SQUISH_CONSTANT_2D)
    return xsb, ysb, dx0, dy0


@njit(cache=True)
def noise2(x, y, perm):
    # Place input coordinates onto the grid.
    stretch_offset = (x + y) * STRETCH_CONSTANT_2D
    xs = x + stretch_offset
    ys = y + stretch_offset

    # A non-finite coordinate has no cell; hand it straight back.
    if not (np.isfinite(xs) and np.isfinite(ys)):
        return xs + ys

    # Rhombus (stretched square) super-cell origin.
    xsb = int(np.floor(xs))
    ysb = int(np.floor(ys))

    squish_offset = (xsb + ysb) * SQUISH_CONSTANT_2D
    xb = xsb + squish_offset
    yb = ysb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    in_sum = xins + yins

    dx0 = x - xb
    dy0 = y - yb

    value = 0.0

    # (1,0)
    dx1 = dx0 - 1 - SQUISH_CONSTANT_2D
    dy1 = dy0 - 0 - SQUISH_CONSTANT_2D
    value += contribution2(perm, xsb + 1, ysb, dx1, dy1)

    # (0,1)
    dx2 = dx0 - 0 - SQUISH_CONSTANT_2D
    dy2 = dy0 - 1 - SQUISH_CONSTANT_2D
    value += contribution2(perm, xsb, ysb + 1, dx2, dy2)

    if in_sum <= 1:
        xsv_ext, ysv_ext, dx_ext, dy_ext = extra_vertex_lower(xsb, ysb, dx0, dy0, xins, yins, in_sum)
        xsv_base, ysv_base = xsb, ysb
        dx_base, dy_base = dx0, dy0
    else:
        xsv_ext, ysv_ext, dx_ext, dy_ext = extra_vertex_upper(xsb, ysb, dx0, dy0, xins, yins, in_sum)
        xsv_base, ysv_base = xsb + 1, ysb + 1
        dx_base = dx0 - 1 - 2 * SQUISH_CONSTANT_2D
        dy_base = dy0 - 1 - 2 * SQUISH_CONSTANT_2D

    # (0,0) or (1,1)
    value += contribution2(perm, xsv_base, ysv_base, dx_base, dy_base)

    value += contribution2(perm, xsv_ext, ysv_ext, dx_ext, dy_ext)

    return value / NORM_CONSTANT_2D


@njit(cache=True, parallel=True)
def noise2_array(xs: np.ndarray, ys: np.ndarray, perm: np.ndarray) -> np.ndarray:
    """Flat element-wise evaluation; the caller handles broadcasting."""
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        output[i] = noise2(xs[i], ys[i], perm)
    return output
