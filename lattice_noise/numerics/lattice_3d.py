# ==============================================================================
# File: lattice_noise/numerics/lattice_3d.py
# Purpose: 3D lattice noise over the simplectic honeycomb (tetrahedra and
#          the rectified octahedron between them).
#
# Vertex bitmasks: 0x01 = x, 0x02 = y, 0x04 = z. A set bit means the vertex
# sits on the high side of that axis within the super-cell.
# ==============================================================================
from __future__ import annotations
import numpy as np
from numba import njit, prange

from ..core.constants import NORM_CONSTANT_3D, SQUISH_CONSTANT_3D, STRETCH_CONSTANT_3D
from .extrapolate import contribution3


# --- Closest-pair ranking -----------------------------------------------------

@njit(inline='always', cache=True)
def promote_greater(a_point, a_score, b_point, b_score, point, score):
    """Let `point` replace the weaker of a/b if its score is larger."""
    if a_score >= b_score and score > b_score:
        return a_point, a_score, point, score
    elif a_score < b_score and score > a_score:
        return point, score, b_point, b_score
    return a_point, a_score, b_point, b_score


@njit(inline='always', cache=True)
def promote_lesser(a_point, a_score, b_point, b_score, point, score):
    """Let `point` replace the weaker of a/b if its score is smaller."""
    if a_score <= b_score and score < b_score:
        return a_point, a_score, point, score
    elif a_score > b_score and score < a_score:
        return point, score, b_point, b_score
    return a_point, a_score, b_point, b_score


@njit(cache=True)
def closest_pair_lower(xins, yins, zins):
    """Two closest of (1,0,0), (0,1,0), (0,0,1)."""
    return promote_greater(0x01, xins, 0x02, yins, 0x04, zins)


@njit(cache=True)
def closest_pair_upper(xins, yins, zins):
    """Two closest of (1,1,0), (1,0,1), (0,1,1)."""
    return promote_lesser(0x06, xins, 0x05, yins, 0x03, zins)


# --- Extra vertices, tetrahedron at (0,0,0) -----------------------------------

@njit(cache=True)
def extras_lower_with_origin(c, xsb, ysb, zsb, dx0, dy0, dz0):
    """(0,0,0) is one of the closest two; `c` is the other one."""
    if (c & 0x01) == 0:
        xsv0 = xsb - 1
        xsv1 = xsb
        dx_0 = dx0 + 1
        dx_1 = dx0
    else:
        xsv0 = xsv1 = xsb + 1
        dx_0 = dx_1 = dx0 - 1

    if (c & 0x02) == 0:
        ysv0 = ysv1 = ysb
        dy_0 = dy_1 = dy0
        if (c & 0x01) == 0:
            ysv1 -= 1
            dy_1 += 1
        else:
            ysv0 -= 1
            dy_0 += 1
    else:
        ysv0 = ysv1 = ysb + 1
        dy_0 = dy_1 = dy0 - 1

    if (c & 0x04) == 0:
        zsv0 = zsb
        zsv1 = zsb - 1
        dz_0 = dz0
        dz_1 = dz0 + 1
    else:
        zsv0 = zsv1 = zsb + 1
        dz_0 = dz_1 = dz0 - 1

    return (xsv0, ysv0, zsv0, dx_0, dy_0, dz_0), (xsv1, ysv1, zsv1, dx_1, dy_1, dz_1)


@njit(cache=True)
def extras_lower_without_origin(c, xsb, ysb, zsb, dx0, dy0, dz0):
    """(0,0,0) is not among the closest two; `c` is their union."""
    if (c & 0x01) == 0:
        xsv0 = xsb
        xsv1 = xsb - 1
        dx_0 = dx0 - 2 * SQUISH_CONSTANT_3D
        dx_1 = dx0 + 1 - SQUISH_CONSTANT_3D
    else:
        xsv0 = xsv1 = xsb + 1
        dx_0 = dx0 - 1 - 2 * SQUISH_CONSTANT_3D
        dx_1 = dx0 - 1 - SQUISH_CONSTANT_3D

    if (c & 0x02) == 0:
        ysv0 = ysb
        ysv1 = ysb - 1
        dy_0 = dy0 - 2 * SQUISH_CONSTANT_3D
        dy_1 = dy0 + 1 - SQUISH_CONSTANT_3D
    else:
        ysv0 = ysv1 = ysb + 1
        dy_0 = dy0 - 1 - 2 * SQUISH_CONSTANT_3D
        dy_1 = dy0 - 1 - SQUISH_CONSTANT_3D

    if (c & 0x04) == 0:
        zsv0 = zsb
        zsv1 = zsb - 1
        dz_0 = dz0 - 2 * SQUISH_CONSTANT_3D
        dz_1 = dz0 + 1 - SQUISH_CONSTANT_3D
    else:
        zsv0 = zsv1 = zsb + 1
        dz_0 = dz0 - 1 - 2 * SQUISH_CONSTANT_3D
        dz_1 = dz0 - 1 - SQUISH_CONSTANT_3D

    return (xsv0, ysv0, zsv0, dx_0, dy_0, dz_0), (xsv1, ysv1, zsv1, dx_1, dy_1, dz_1)


# --- Extra vertices, tetrahedron at (1,1,1) -----------------------------------

@njit(cache=True)
def extras_upper_with_corner(c, xsb, ysb, zsb, dx0, dy0, dz0):
    """(1,1,1) is one of the closest two; `c` is the other one."""
    if (c & 0x01) != 0:
        xsv0 = xsb + 2
        xsv1 = xsb + 1
        dx_0 = dx0 - 2 - 3 * SQUISH_CONSTANT_3D
        dx_1 = dx0 - 1 - 3 * SQUISH_CONSTANT_3D
    else:
        xsv0 = xsv1 = xsb
        dx_0 = dx_1 = dx0 - 3 * SQUISH_CONSTANT_3D

    if (c & 0x02) != 0:
        ysv0 = ysv1 = ysb + 1
        dy_0 = dy_1 = dy0 - 1 - 3 * SQUISH_CONSTANT_3D
        if (c & 0x01) != 0:
            ysv1 += 1
            dy_1 -= 1
        else:
            ysv0 += 1
            dy_0 -= 1
    else:
        ysv0 = ysv1 = ysb
        dy_0 = dy_1 = dy0 - 3 * SQUISH_CONSTANT_3D

    if (c & 0x04) != 0:
        zsv0 = zsb + 1
        zsv1 = zsb + 2
        dz_0 = dz0 - 1 - 3 * SQUISH_CONSTANT_3D
        dz_1 = dz0 - 2 - 3 * SQUISH_CONSTANT_3D
    else:
        zsv0 = zsv1 = zsb
        dz_0 = dz_1 = dz0 - 3 * SQUISH_CONSTANT_3D

    return (xsv0, ysv0, zsv0, dx_0, dy_0, dz_0), (xsv1, ysv1, zsv1, dx_1, dy_1, dz_1)


@njit(cache=True)
def extras_upper_without_corner(c, xsb, ysb, zsb, dx0, dy0, dz0):
    """(1,1,1) is not among the closest two; `c` is their intersection."""
    if (c & 0x01) != 0:
        xsv0 = xsb + 1
        xsv1 = xsb + 2
        dx_0 = dx0 - 1 - SQUISH_CONSTANT_3D
        dx_1 = dx0 - 2 - 2 * SQUISH_CONSTANT_3D
    else:
        xsv0 = xsv1 = xsb
        dx_0 = dx0 - SQUISH_CONSTANT_3D
        dx_1 = dx0 - 2 * SQUISH_CONSTANT_3D

    if (c & 0x02) != 0:
        ysv0 = ysb + 1
        ysv1 = ysb + 2
        dy_0 = dy0 - 1 - SQUISH_CONSTANT_3D
        dy_1 = dy0 - 2 - 2 * SQUISH_CONSTANT_3D
    else:
        ysv0 = ysv1 = ysb
        dy_0 = dy0 - SQUISH_CONSTANT_3D
        dy_1 = dy0 - 2 * SQUISH_CONSTANT_3D

    if (c & 0x04) != 0:
        zsv0 = zsb + 1
        zsv1 = zsb + 2
        dz_0 = dz0 - 1 - SQUISH_CONSTANT_3D
        dz_1 = dz0 - 2 - 2 * SQUISH_CONSTANT_3D
    else:
        zsv0 = zsv1 = zsb
        dz_0 = dz0 - SQUISH_CONSTANT_3D
        dz_1 = dz0 - 2 * SQUISH_CONSTANT_3D

    return (xsv0, ysv0, zsv0, dx_0, dy_0, dz_0), (xsv1, ysv1, zsv1, dx_1, dy_1, dz_1)


# --- Extra vertices, octahedron in between ------------------------------------

@njit(cache=True)
def closest_pair_octahedron(xins, yins, zins):
    """Returns (a_point, a_further, b_point, b_further).

    `*_further` marks a point on the (1,1,1) side of the octahedron.
    """
    # (0,0,1) vs (1,1,0)
    p1 = xins + yins
    if p1 > 1:
        a_score = p1 - 1
        a_point = 0x03
        a_further = True
    else:
        a_score = 1 - p1
        a_point = 0x04
        a_further = False

    # (0,1,0) vs (1,0,1)
    p2 = xins + zins
    if p2 > 1:
        b_score = p2 - 1
        b_point = 0x05
        b_further = True
    else:
        b_score = 1 - p2
        b_point = 0x02
        b_further = False

    # The closer of (1,0,0) and (0,1,1) replaces the further of a and b.
    p3 = yins + zins
    if p3 > 1:
        score = p3 - 1
        if a_score <= b_score and a_score < score:
            a_point = 0x06
            a_further = True
        elif a_score > b_score and b_score < score:
            b_point = 0x06
            b_further = True
    else:
        score = 1 - p3
        if a_score <= b_score and a_score < score:
            a_point = 0x01
            a_further = False
        elif a_score > b_score and b_score < score:
            b_point = 0x01
            b_further = False

    return a_point, a_further, b_point, b_further


@njit(cache=True)
def vertex_one_one_minus_one(c, xsb, ysb, zsb, dx0, dy0, dz0):
    """Permutation of (1,1,-1): the axis missing from `c` goes to -1."""
    if (c & 0x01) == 0:
        return (xsb - 1, ysb + 1, zsb + 1,
                dx0 + 1 - SQUISH_CONSTANT_3D,
                dy0 - 1 - SQUISH_CONSTANT_3D,
                dz0 - 1 - SQUISH_CONSTANT_3D)
    elif (c & 0x02) == 0:
        return (xsb + 1, ysb - 1, zsb + 1,
                dx0 - 1 - SQUISH_CONSTANT_3D,
                dy0 + 1 - SQUISH_CONSTANT_3D,
                dz0 - 1 - SQUISH_CONSTANT_3D)
    return (xsb + 1, ysb + 1, zsb - 1,
            dx0 - 1 - SQUISH_CONSTANT_3D,
            dy0 - 1 - SQUISH_CONSTANT_3D,
            dz0 + 1 - SQUISH_CONSTANT_3D)


@njit(cache=True)
def extras_octahedron_further(a_point, b_point, xsb, ysb, zsb, dx0, dy0, dz0):
    """Both closest points on the (1,1,1) side."""
    ext0 = (xsb + 1, ysb + 1, zsb + 1,
            dx0 - 1 - 3 * SQUISH_CONSTANT_3D,
            dy0 - 1 - 3 * SQUISH_CONSTANT_3D,
            dz0 - 1 - 3 * SQUISH_CONSTANT_3D)

    # The other is based on the shared axis.
    c = a_point & b_point
    if (c & 0x01) != 0:
        ext1 = (xsb + 2, ysb, zsb,
                dx0 - 2 - 2 * SQUISH_CONSTANT_3D,
                dy0 - 2 * SQUISH_CONSTANT_3D,
                dz0 - 2 * SQUISH_CONSTANT_3D)
    elif (c & 0x02) != 0:
        ext1 = (xsb, ysb + 2, zsb,
                dx0 - 2 * SQUISH_CONSTANT_3D,
                dy0 - 2 - 2 * SQUISH_CONSTANT_3D,
                dz0 - 2 * SQUISH_CONSTANT_3D)
    else:
        ext1 = (xsb, ysb, zsb + 2,
                dx0 - 2 * SQUISH_CONSTANT_3D,
                dy0 - 2 * SQUISH_CONSTANT_3D,
                dz0 - 2 - 2 * SQUISH_CONSTANT_3D)
    return ext0, ext1


@njit(cache=True)
def extras_octahedron_nearer(a_point, b_point, xsb, ysb, zsb, dx0, dy0, dz0):
    """Both closest points on the (0,0,0) side."""
    ext0 = (xsb, ysb, zsb, dx0, dy0, dz0)
    # The other is based on the omitted axis.
    ext1 = vertex_one_one_minus_one(a_point | b_point, xsb, ysb, zsb, dx0, dy0, dz0)
    return ext0, ext1


@njit(cache=True)
def extras_octahedron_split(c1, c2, xsb, ysb, zsb, dx0, dy0, dz0):
    """One closest point on each side; `c1` is the one on the (1,1,1) side."""
    ext0 = vertex_one_one_minus_one(c1, xsb, ysb, zsb, dx0, dy0, dz0)

    # Permutation of (0,0,2).
    xsv1 = xsb
    ysv1 = ysb
    zsv1 = zsb
    dx_1 = dx0 - 2 * SQUISH_CONSTANT_3D
    dy_1 = dy0 - 2 * SQUISH_CONSTANT_3D
    dz_1 = dz0 - 2 * SQUISH_CONSTANT_3D
    if (c2 & 0x01) != 0:
        dx_1 -= 2
        xsv1 += 2
    elif (c2 & 0x02) != 0:
        dy_1 -= 2
        ysv1 += 2
    else:
        dz_1 -= 2
        zsv1 += 2
    return ext0, (xsv1, ysv1, zsv1, dx_1, dy_1, dz_1)


# --- Evaluation ---------------------------------------------------------------

@njit(cache=True)
def noise3(x, y, z, perm, grad_index):
    # Place input coordinates on the simplectic honeycomb.
    stretch_offset = (x + y + z) * STRETCH_CONSTANT_3D
    xs = x + stretch_offset
    ys = y + stretch_offset
    zs = z + stretch_offset

    if not (np.isfinite(xs) and np.isfinite(ys) and np.isfinite(zs)):
        return xs + ys + zs

    # Rhombohedron (stretched cube) super-cell origin.
    xsb = int(np.floor(xs))
    ysb = int(np.floor(ys))
    zsb = int(np.floor(zs))

    squish_offset = (xsb + ysb + zsb) * SQUISH_CONSTANT_3D
    xb = xsb + squish_offset
    yb = ysb + squish_offset
    zb = zsb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    zins = zs - zsb
    in_sum = xins + yins + zins

    dx0 = x - xb
    dy0 = y - yb
    dz0 = z - zb

    value = 0.0
    if in_sum <= 1:
        # Tetrahedron at (0,0,0)
        a_point, a_score, b_point, b_score = closest_pair_lower(xins, yins, zins)
        wins = 1 - in_sum
        if wins > a_score or wins > b_score:
            c = b_point if b_score > a_score else a_point
            ext0, ext1 = extras_lower_with_origin(c, xsb, ysb, zsb, dx0, dy0, dz0)
        else:
            ext0, ext1 = extras_lower_without_origin(a_point | b_point, xsb, ysb, zsb, dx0, dy0, dz0)

        # (0,0,0)
        value += contribution3(perm, grad_index, xsb, ysb, zsb, dx0, dy0, dz0)

        # (1,0,0)
        dx1 = dx0 - 1 - SQUISH_CONSTANT_3D
        dy1 = dy0 - 0 - SQUISH_CONSTANT_3D
        dz1 = dz0 - 0 - SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb, zsb, dx1, dy1, dz1)

        # (0,1,0)
        dx2 = dx0 - 0 - SQUISH_CONSTANT_3D
        dy2 = dy0 - 1 - SQUISH_CONSTANT_3D
        dz2 = dz1
        value += contribution3(perm, grad_index, xsb, ysb + 1, zsb, dx2, dy2, dz2)

        # (0,0,1)
        dx3 = dx2
        dy3 = dy1
        dz3 = dz0 - 1 - SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb, ysb, zsb + 1, dx3, dy3, dz3)

    elif in_sum >= 2:
        # Tetrahedron at (1,1,1)
        a_point, a_score, b_point, b_score = closest_pair_upper(xins, yins, zins)
        wins = 3 - in_sum
        if wins < a_score or wins < b_score:
            c = b_point if b_score < a_score else a_point
            ext0, ext1 = extras_upper_with_corner(c, xsb, ysb, zsb, dx0, dy0, dz0)
        else:
            ext0, ext1 = extras_upper_without_corner(a_point & b_point, xsb, ysb, zsb, dx0, dy0, dz0)

        # (1,1,0)
        dx3 = dx0 - 1 - 2 * SQUISH_CONSTANT_3D
        dy3 = dy0 - 1 - 2 * SQUISH_CONSTANT_3D
        dz3 = dz0 - 0 - 2 * SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb + 1, zsb, dx3, dy3, dz3)

        # (1,0,1)
        dx2 = dx3
        dy2 = dy0 - 0 - 2 * SQUISH_CONSTANT_3D
        dz2 = dz0 - 1 - 2 * SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb, zsb + 1, dx2, dy2, dz2)

        # (0,1,1)
        dx1 = dx0 - 0 - 2 * SQUISH_CONSTANT_3D
        dy1 = dy3
        dz1 = dz2
        value += contribution3(perm, grad_index, xsb, ysb + 1, zsb + 1, dx1, dy1, dz1)

        # (1,1,1)
        dx_c = dx0 - 1 - 3 * SQUISH_CONSTANT_3D
        dy_c = dy0 - 1 - 3 * SQUISH_CONSTANT_3D
        dz_c = dz0 - 1 - 3 * SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb + 1, zsb + 1, dx_c, dy_c, dz_c)

    else:
        # Octahedron (rectified 3-simplex) in between
        a_point, a_further, b_point, b_further = closest_pair_octahedron(xins, yins, zins)
        if a_further == b_further:
            if a_further:
                ext0, ext1 = extras_octahedron_further(a_point, b_point, xsb, ysb, zsb, dx0, dy0, dz0)
            else:
                ext0, ext1 = extras_octahedron_nearer(a_point, b_point, xsb, ysb, zsb, dx0, dy0, dz0)
        else:
            if a_further:
                c1, c2 = a_point, b_point
            else:
                c1, c2 = b_point, a_point
            ext0, ext1 = extras_octahedron_split(c1, c2, xsb, ysb, zsb, dx0, dy0, dz0)

        # (1,0,0)
        dx1 = dx0 - 1 - SQUISH_CONSTANT_3D
        dy1 = dy0 - 0 - SQUISH_CONSTANT_3D
        dz1 = dz0 - 0 - SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb, zsb, dx1, dy1, dz1)

        # (0,1,0)
        dx2 = dx0 - 0 - SQUISH_CONSTANT_3D
        dy2 = dy0 - 1 - SQUISH_CONSTANT_3D
        dz2 = dz1
        value += contribution3(perm, grad_index, xsb, ysb + 1, zsb, dx2, dy2, dz2)

        # (0,0,1)
        dx3 = dx2
        dy3 = dy1
        dz3 = dz0 - 1 - SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb, ysb, zsb + 1, dx3, dy3, dz3)

        # (1,1,0)
        dx4 = dx0 - 1 - 2 * SQUISH_CONSTANT_3D
        dy4 = dy0 - 1 - 2 * SQUISH_CONSTANT_3D
        dz4 = dz0 - 0 - 2 * SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb + 1, zsb, dx4, dy4, dz4)

        # (1,0,1)
        dx5 = dx4
        dy5 = dy0 - 0 - 2 * SQUISH_CONSTANT_3D
        dz5 = dz0 - 1 - 2 * SQUISH_CONSTANT_3D
        value += contribution3(perm, grad_index, xsb + 1, ysb, zsb + 1, dx5, dy5, dz5)

        # (0,1,1)
        dx6 = dx0 - 0 - 2 * SQUISH_CONSTANT_3D
        dy6 = dy4
        dz6 = dz5
        value += contribution3(perm, grad_index, xsb, ysb + 1, zsb + 1, dx6, dy6, dz6)

    xsv0, ysv0, zsv0, dx_e0, dy_e0, dz_e0 = ext0
    value += contribution3(perm, grad_index, xsv0, ysv0, zsv0, dx_e0, dy_e0, dz_e0)

    xsv1, ysv1, zsv1, dx_e1, dy_e1, dz_e1 = ext1
    value += contribution3(perm, grad_index, xsv1, ysv1, zsv1, dx_e1, dy_e1, dz_e1)

    return value / NORM_CONSTANT_3D


@njit(cache=True, parallel=True)
def noise3_array(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray,
                 perm: np.ndarray, grad_index: np.ndarray) -> np.ndarray:
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        output[i] = noise3(xs[i], ys[i], zs[i], perm, grad_index)
    return output
