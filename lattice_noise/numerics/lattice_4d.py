# ==============================================================================
# File: lattice_noise/numerics/lattice_4d.py
# Purpose: 4D lattice noise over the simplectic honeycomb (two pentachora
#          and the two rectified 4-simplices between them).
#
# Vertex bitmasks: 0x01 = x, 0x02 = y, 0x04 = z, 0x08 = w.
# Extra vertices travel as (xsv, ysv, zsv, wsv, dx, dy, dz, dw) tuples.
# ==============================================================================
from __future__ import annotations
import numpy as np
from numba import njit, prange

from ..core.constants import NORM_CONSTANT_4D, SQUISH_CONSTANT_4D, STRETCH_CONSTANT_4D
from .extrapolate import contribution4
from .lattice_3d import promote_greater, promote_lesser


@njit(inline='always', cache=True)
def promote_greater_sided(a_point, a_score, a_big, b_point, b_score, b_big, point, score, big):
    if a_score >= b_score and score > b_score:
        return a_point, a_score, a_big, point, score, big
    elif a_score < b_score and score > a_score:
        return point, score, big, b_point, b_score, b_big
    return a_point, a_score, a_big, b_point, b_score, b_big


@njit(inline='always', cache=True)
def promote_lesser_sided(a_point, a_score, a_big, b_point, b_score, b_big, point, score, big):
    if a_score <= b_score and score < b_score:
        return a_point, a_score, a_big, point, score, big
    elif a_score > b_score and score < a_score:
        return point, score, big, b_point, b_score, b_big
    return a_point, a_score, a_big, b_point, b_score, b_big


# --- Pentachoron at (0,0,0,0) -------------------------------------------------

@njit(cache=True)
def closest_pair_lower(xins, yins, zins, wins):
    a_point, a_score, b_point, b_score = promote_greater(0x01, xins, 0x02, yins, 0x04, zins)
    return promote_greater(a_point, a_score, b_point, b_score, 0x08, wins)


@njit(cache=True)
def extras_lower_with_origin(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if (c & 0x01) == 0:
        xsv0 = xsb - 1
        xsv1 = xsv2 = xsb
        dx_0 = dx0 + 1
        dx_1 = dx_2 = dx0
    else:
        xsv0 = xsv1 = xsv2 = xsb + 1
        dx_0 = dx_1 = dx_2 = dx0 - 1

    if (c & 0x02) == 0:
        ysv0 = ysv1 = ysv2 = ysb
        dy_0 = dy_1 = dy_2 = dy0
        if (c & 0x01) == 0x01:
            ysv0 -= 1
            dy_0 += 1
        else:
            ysv1 -= 1
            dy_1 += 1
    else:
        ysv0 = ysv1 = ysv2 = ysb + 1
        dy_0 = dy_1 = dy_2 = dy0 - 1

    if (c & 0x04) == 0:
        zsv0 = zsv1 = zsv2 = zsb
        dz_0 = dz_1 = dz_2 = dz0
        if (c & 0x03) != 0:
            if (c & 0x03) == 0x03:
                zsv0 -= 1
                dz_0 += 1
            else:
                zsv1 -= 1
                dz_1 += 1
        else:
            zsv2 -= 1
            dz_2 += 1
    else:
        zsv0 = zsv1 = zsv2 = zsb + 1
        dz_0 = dz_1 = dz_2 = dz0 - 1

    if (c & 0x08) == 0:
        wsv0 = wsv1 = wsb
        wsv2 = wsb - 1
        dw_0 = dw_1 = dw0
        dw_2 = dw0 + 1
    else:
        wsv0 = wsv1 = wsv2 = wsb + 1
        dw_0 = dw_1 = dw_2 = dw0 - 1

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1),
            (xsv2, ysv2, zsv2, wsv2, dx_2, dy_2, dz_2, dw_2))


@njit(cache=True)
def extras_lower_without_origin(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if (c & 0x01) == 0:
        xsv0 = xsv2 = xsb
        xsv1 = xsb - 1
        dx_0 = dx0 - 2 * SQUISH_CONSTANT_4D
        dx_1 = dx0 + 1 - SQUISH_CONSTANT_4D
        dx_2 = dx0 - SQUISH_CONSTANT_4D
    else:
        xsv0 = xsv1 = xsv2 = xsb + 1
        dx_0 = dx0 - 1 - 2 * SQUISH_CONSTANT_4D
        dx_1 = dx_2 = dx0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x02) == 0:
        ysv0 = ysv1 = ysv2 = ysb
        dy_0 = dy0 - 2 * SQUISH_CONSTANT_4D
        dy_1 = dy_2 = dy0 - SQUISH_CONSTANT_4D
        if (c & 0x01) == 0x01:
            ysv1 -= 1
            dy_1 += 1
        else:
            ysv2 -= 1
            dy_2 += 1
    else:
        ysv0 = ysv1 = ysv2 = ysb + 1
        dy_0 = dy0 - 1 - 2 * SQUISH_CONSTANT_4D
        dy_1 = dy_2 = dy0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x04) == 0:
        zsv0 = zsv1 = zsv2 = zsb
        dz_0 = dz0 - 2 * SQUISH_CONSTANT_4D
        dz_1 = dz_2 = dz0 - SQUISH_CONSTANT_4D
        if (c & 0x03) == 0x03:
            zsv1 -= 1
            dz_1 += 1
        else:
            zsv2 -= 1
            dz_2 += 1
    else:
        zsv0 = zsv1 = zsv2 = zsb + 1
        dz_0 = dz0 - 1 - 2 * SQUISH_CONSTANT_4D
        dz_1 = dz_2 = dz0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x08) == 0:
        wsv0 = wsv1 = wsb
        wsv2 = wsb - 1
        dw_0 = dw0 - 2 * SQUISH_CONSTANT_4D
        dw_1 = dw0 - SQUISH_CONSTANT_4D
        dw_2 = dw0 + 1 - SQUISH_CONSTANT_4D
    else:
        wsv0 = wsv1 = wsv2 = wsb + 1
        dw_0 = dw0 - 1 - 2 * SQUISH_CONSTANT_4D
        dw_1 = dw_2 = dw0 - 1 - SQUISH_CONSTANT_4D

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1),
            (xsv2, ysv2, zsv2, wsv2, dx_2, dy_2, dz_2, dw_2))


# --- Pentachoron at (1,1,1,1) -------------------------------------------------

@njit(cache=True)
def closest_pair_upper(xins, yins, zins, wins):
    a_point, a_score, b_point, b_score = promote_lesser(0x0E, xins, 0x0D, yins, 0x0B, zins)
    return promote_lesser(a_point, a_score, b_point, b_score, 0x07, wins)


@njit(cache=True)
def extras_upper_with_corner(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if (c & 0x01) != 0:
        xsv0 = xsb + 2
        xsv1 = xsv2 = xsb + 1
        dx_0 = dx0 - 2 - 4 * SQUISH_CONSTANT_4D
        dx_1 = dx_2 = dx0 - 1 - 4 * SQUISH_CONSTANT_4D
    else:
        xsv0 = xsv1 = xsv2 = xsb
        dx_0 = dx_1 = dx_2 = dx0 - 4 * SQUISH_CONSTANT_4D

    if (c & 0x02) != 0:
        ysv0 = ysv1 = ysv2 = ysb + 1
        dy_0 = dy_1 = dy_2 = dy0 - 1 - 4 * SQUISH_CONSTANT_4D
        if (c & 0x01) != 0:
            ysv1 += 1
            dy_1 -= 1
        else:
            ysv0 += 1
            dy_0 -= 1
    else:
        ysv0 = ysv1 = ysv2 = ysb
        dy_0 = dy_1 = dy_2 = dy0 - 4 * SQUISH_CONSTANT_4D

    if (c & 0x04) != 0:
        zsv0 = zsv1 = zsv2 = zsb + 1
        dz_0 = dz_1 = dz_2 = dz0 - 1 - 4 * SQUISH_CONSTANT_4D
        if (c & 0x03) != 0x03:
            if (c & 0x03) == 0:
                zsv0 += 1
                dz_0 -= 1
            else:
                zsv1 += 1
                dz_1 -= 1
        else:
            zsv2 += 1
            dz_2 -= 1
    else:
        zsv0 = zsv1 = zsv2 = zsb
        dz_0 = dz_1 = dz_2 = dz0 - 4 * SQUISH_CONSTANT_4D

    if (c & 0x08) != 0:
        wsv0 = wsv1 = wsb + 1
        wsv2 = wsb + 2
        dw_0 = dw_1 = dw0 - 1 - 4 * SQUISH_CONSTANT_4D
        dw_2 = dw0 - 2 - 4 * SQUISH_CONSTANT_4D
    else:
        wsv0 = wsv1 = wsv2 = wsb
        dw_0 = dw_1 = dw_2 = dw0 - 4 * SQUISH_CONSTANT_4D

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1),
            (xsv2, ysv2, zsv2, wsv2, dx_2, dy_2, dz_2, dw_2))


@njit(cache=True)
def extras_upper_without_corner(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if (c & 0x01) != 0:
        xsv0 = xsv2 = xsb + 1
        xsv1 = xsb + 2
        dx_0 = dx0 - 1 - 2 * SQUISH_CONSTANT_4D
        dx_1 = dx0 - 2 - 3 * SQUISH_CONSTANT_4D
        dx_2 = dx0 - 1 - 3 * SQUISH_CONSTANT_4D
    else:
        xsv0 = xsv1 = xsv2 = xsb
        dx_0 = dx0 - 2 * SQUISH_CONSTANT_4D
        dx_1 = dx_2 = dx0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x02) != 0:
        ysv0 = ysv1 = ysv2 = ysb + 1
        dy_0 = dy0 - 1 - 2 * SQUISH_CONSTANT_4D
        dy_1 = dy_2 = dy0 - 1 - 3 * SQUISH_CONSTANT_4D
        if (c & 0x01) != 0:
            ysv2 += 1
            dy_2 -= 1
        else:
            ysv1 += 1
            dy_1 -= 1
    else:
        ysv0 = ysv1 = ysv2 = ysb
        dy_0 = dy0 - 2 * SQUISH_CONSTANT_4D
        dy_1 = dy_2 = dy0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x04) != 0:
        zsv0 = zsv1 = zsv2 = zsb + 1
        dz_0 = dz0 - 1 - 2 * SQUISH_CONSTANT_4D
        dz_1 = dz_2 = dz0 - 1 - 3 * SQUISH_CONSTANT_4D
        if (c & 0x03) != 0:
            zsv2 += 1
            dz_2 -= 1
        else:
            zsv1 += 1
            dz_1 -= 1
    else:
        zsv0 = zsv1 = zsv2 = zsb
        dz_0 = dz0 - 2 * SQUISH_CONSTANT_4D
        dz_1 = dz_2 = dz0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x08) != 0:
        wsv0 = wsv1 = wsb + 1
        wsv2 = wsb + 2
        dw_0 = dw0 - 1 - 2 * SQUISH_CONSTANT_4D
        dw_1 = dw0 - 1 - 3 * SQUISH_CONSTANT_4D
        dw_2 = dw0 - 2 - 3 * SQUISH_CONSTANT_4D
    else:
        wsv0 = wsv1 = wsv2 = wsb
        dw_0 = dw0 - 2 * SQUISH_CONSTANT_4D
        dw_1 = dw_2 = dw0 - 3 * SQUISH_CONSTANT_4D

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1),
            (xsv2, ysv2, zsv2, wsv2, dx_2, dy_2, dz_2, dw_2))


# --- Rectified 4-simplices in between -----------------------------------------

@njit(cache=True)
def closest_pair_first_rectified(xins, yins, zins, wins, in_sum):
    """Returns (a_point, a_big, b_point, b_big) for 1 < in_sum <= 2."""
    # (1,1,0,0) vs (0,0,1,1)
    if xins + yins > zins + wins:
        a_score = xins + yins
        a_point = 0x03
    else:
        a_score = zins + wins
        a_point = 0x0C

    # (1,0,1,0) vs (0,1,0,1)
    if xins + zins > yins + wins:
        b_score = xins + zins
        b_point = 0x05
    else:
        b_score = yins + wins
        b_point = 0x0A

    a_big = True
    b_big = True

    # Closer of (1,0,0,1) and (0,1,1,0) replaces the further of a and b.
    if xins + wins > yins + zins:
        a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
            a_point, a_score, a_big, b_point, b_score, b_big, 0x09, xins + wins, True)
    else:
        a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
            a_point, a_score, a_big, b_point, b_score, b_big, 0x06, yins + zins, True)

    p1 = 2 - in_sum + xins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x01, p1, False)
    p2 = 2 - in_sum + yins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x02, p2, False)
    p3 = 2 - in_sum + zins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x04, p3, False)
    p4 = 2 - in_sum + wins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_greater_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x08, p4, False)

    return a_point, a_big, b_point, b_big


@njit(cache=True)
def closest_pair_second_rectified(xins, yins, zins, wins, in_sum):
    """Returns (a_point, a_big, b_point, b_big) for 2 < in_sum < 3."""
    # (0,0,1,1) vs (1,1,0,0)
    if xins + yins < zins + wins:
        a_score = xins + yins
        a_point = 0x0C
    else:
        a_score = zins + wins
        a_point = 0x03

    # (0,1,0,1) vs (1,0,1,0)
    if xins + zins < yins + wins:
        b_score = xins + zins
        b_point = 0x0A
    else:
        b_score = yins + wins
        b_point = 0x05

    a_big = True
    b_big = True

    # Closer of (0,1,1,0) and (1,0,0,1) replaces the further of a and b.
    if xins + wins < yins + zins:
        a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
            a_point, a_score, a_big, b_point, b_score, b_big, 0x06, xins + wins, True)
    else:
        a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
            a_point, a_score, a_big, b_point, b_score, b_big, 0x09, yins + zins, True)

    p1 = 3 - in_sum + xins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x0E, p1, False)
    p2 = 3 - in_sum + yins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x0D, p2, False)
    p3 = 3 - in_sum + zins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x0B, p3, False)
    p4 = 3 - in_sum + wins
    a_point, a_score, a_big, b_point, b_score, b_big = promote_lesser_sided(
        a_point, a_score, a_big, b_point, b_score, b_big, 0x07, p4, False)

    return a_point, a_big, b_point, b_big


@njit(cache=True)
def pair_zeros_to_minus_one(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """Two vertices: point `c` with each 0 replaced by -1."""
    if (c & 0x01) == 0:
        xsv0 = xsb - 1
        xsv1 = xsb
        dx_0 = dx0 + 1 - SQUISH_CONSTANT_4D
        dx_1 = dx0 - SQUISH_CONSTANT_4D
    else:
        xsv0 = xsv1 = xsb + 1
        dx_0 = dx_1 = dx0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x02) == 0:
        ysv0 = ysv1 = ysb
        dy_0 = dy_1 = dy0 - SQUISH_CONSTANT_4D
        if (c & 0x01) == 0x01:
            ysv0 -= 1
            dy_0 += 1
        else:
            ysv1 -= 1
            dy_1 += 1
    else:
        ysv0 = ysv1 = ysb + 1
        dy_0 = dy_1 = dy0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x04) == 0:
        zsv0 = zsv1 = zsb
        dz_0 = dz_1 = dz0 - SQUISH_CONSTANT_4D
        if (c & 0x03) == 0x03:
            zsv0 -= 1
            dz_0 += 1
        else:
            zsv1 -= 1
            dz_1 += 1
    else:
        zsv0 = zsv1 = zsb + 1
        dz_0 = dz_1 = dz0 - 1 - SQUISH_CONSTANT_4D

    if (c & 0x08) == 0:
        wsv0 = wsb
        wsv1 = wsb - 1
        dw_0 = dw0 - SQUISH_CONSTANT_4D
        dw_1 = dw0 + 1 - SQUISH_CONSTANT_4D
    else:
        wsv0 = wsv1 = wsb + 1
        dw_0 = dw_1 = dw0 - 1 - SQUISH_CONSTANT_4D

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1))


@njit(cache=True)
def pair_ones_to_two(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """Two vertices: point `c` with each 1 replaced by 2."""
    if (c & 0x01) != 0:
        xsv0 = xsb + 2
        xsv1 = xsb + 1
        dx_0 = dx0 - 2 - 3 * SQUISH_CONSTANT_4D
        dx_1 = dx0 - 1 - 3 * SQUISH_CONSTANT_4D
    else:
        xsv0 = xsv1 = xsb
        dx_0 = dx_1 = dx0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x02) != 0:
        ysv0 = ysv1 = ysb + 1
        dy_0 = dy_1 = dy0 - 1 - 3 * SQUISH_CONSTANT_4D
        if (c & 0x01) == 0:
            ysv0 += 1
            dy_0 -= 1
        else:
            ysv1 += 1
            dy_1 -= 1
    else:
        ysv0 = ysv1 = ysb
        dy_0 = dy_1 = dy0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x04) != 0:
        zsv0 = zsv1 = zsb + 1
        dz_0 = dz_1 = dz0 - 1 - 3 * SQUISH_CONSTANT_4D
        if (c & 0x03) == 0:
            zsv0 += 1
            dz_0 -= 1
        else:
            zsv1 += 1
            dz_1 -= 1
    else:
        zsv0 = zsv1 = zsb
        dz_0 = dz_1 = dz0 - 3 * SQUISH_CONSTANT_4D

    if (c & 0x08) != 0:
        wsv0 = wsb + 1
        wsv1 = wsb + 2
        dw_0 = dw0 - 1 - 3 * SQUISH_CONSTANT_4D
        dw_1 = dw0 - 2 - 3 * SQUISH_CONSTANT_4D
    else:
        wsv0 = wsv1 = wsb
        dw_0 = dw_1 = dw0 - 3 * SQUISH_CONSTANT_4D

    return ((xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0),
            (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1))


@njit(cache=True)
def vertex_zero_zero_zero_two(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """Permutation of (0,0,0,2) on the first axis set in `c`."""
    xsv = xsb
    ysv = ysb
    zsv = zsb
    wsv = wsb
    dx = dx0 - 2 * SQUISH_CONSTANT_4D
    dy = dy0 - 2 * SQUISH_CONSTANT_4D
    dz = dz0 - 2 * SQUISH_CONSTANT_4D
    dw = dw0 - 2 * SQUISH_CONSTANT_4D
    if (c & 0x01) != 0:
        xsv += 2
        dx -= 2
    elif (c & 0x02) != 0:
        ysv += 2
        dy -= 2
    elif (c & 0x04) != 0:
        zsv += 2
        dz -= 2
    else:
        wsv += 2
        dw -= 2
    return xsv, ysv, zsv, wsv, dx, dy, dz, dw


@njit(cache=True)
def vertex_one_one_one_minus_one(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """Permutation of (1,1,1,-1) on the first axis clear in `c`."""
    xsv = xsb + 1
    ysv = ysb + 1
    zsv = zsb + 1
    wsv = wsb + 1
    dx = dx0 - 1 - 2 * SQUISH_CONSTANT_4D
    dy = dy0 - 1 - 2 * SQUISH_CONSTANT_4D
    dz = dz0 - 1 - 2 * SQUISH_CONSTANT_4D
    dw = dw0 - 1 - 2 * SQUISH_CONSTANT_4D
    if (c & 0x01) == 0:
        xsv -= 2
        dx += 2
    elif (c & 0x02) == 0:
        ysv -= 2
        dy += 2
    elif (c & 0x04) == 0:
        zsv -= 2
        dz += 2
    else:
        wsv -= 2
        dw += 2
    return xsv, ysv, zsv, wsv, dx, dy, dz, dw


@njit(cache=True)
def extras_first_rectified(a_point, a_big, b_point, b_big, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if a_big == b_big:
        if a_big:
            # Both closest points on the bigger side
            c1 = a_point | b_point
            if (c1 & 0x01) == 0:
                xsv0 = xsb
                xsv1 = xsb - 1
                dx_0 = dx0 - 3 * SQUISH_CONSTANT_4D
                dx_1 = dx0 + 1 - 2 * SQUISH_CONSTANT_4D
            else:
                xsv0 = xsv1 = xsb + 1
                dx_0 = dx0 - 1 - 3 * SQUISH_CONSTANT_4D
                dx_1 = dx0 - 1 - 2 * SQUISH_CONSTANT_4D

            if (c1 & 0x02) == 0:
                ysv0 = ysb
                ysv1 = ysb - 1
                dy_0 = dy0 - 3 * SQUISH_CONSTANT_4D
                dy_1 = dy0 + 1 - 2 * SQUISH_CONSTANT_4D
            else:
                ysv0 = ysv1 = ysb + 1
                dy_0 = dy0 - 1 - 3 * SQUISH_CONSTANT_4D
                dy_1 = dy0 - 1 - 2 * SQUISH_CONSTANT_4D

            if (c1 & 0x04) == 0:
                zsv0 = zsb
                zsv1 = zsb - 1
                dz_0 = dz0 - 3 * SQUISH_CONSTANT_4D
                dz_1 = dz0 + 1 - 2 * SQUISH_CONSTANT_4D
            else:
                zsv0 = zsv1 = zsb + 1
                dz_0 = dz0 - 1 - 3 * SQUISH_CONSTANT_4D
                dz_1 = dz0 - 1 - 2 * SQUISH_CONSTANT_4D

            if (c1 & 0x08) == 0:
                wsv0 = wsb
                wsv1 = wsb - 1
                dw_0 = dw0 - 3 * SQUISH_CONSTANT_4D
                dw_1 = dw0 + 1 - 2 * SQUISH_CONSTANT_4D
            else:
                wsv0 = wsv1 = wsb + 1
                dw_0 = dw0 - 1 - 3 * SQUISH_CONSTANT_4D
                dw_1 = dw0 - 1 - 2 * SQUISH_CONSTANT_4D

            ext0 = (xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0)
            ext1 = (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1)
            ext2 = vertex_zero_zero_zero_two(a_point & b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        else:
            # Both on the smaller side: (0,0,0,0) plus two from the omitted axes.
            ext0, ext1 = pair_zeros_to_minus_one(a_point | b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
            ext2 = (xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
    else:
        if a_big:
            c1, c2 = a_point, b_point
        else:
            c1, c2 = b_point, a_point
        ext0, ext1 = pair_zeros_to_minus_one(c1, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        ext2 = vertex_zero_zero_zero_two(c2, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
    return ext0, ext1, ext2


@njit(cache=True)
def extras_second_rectified(a_point, a_big, b_point, b_big, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    if a_big == b_big:
        if a_big:
            # Both closest points on the bigger side
            c1 = a_point & b_point
            xsv0 = xsv1 = xsb
            ysv0 = ysv1 = ysb
            zsv0 = zsv1 = zsb
            wsv0 = wsv1 = wsb
            dx_0 = dx0 - SQUISH_CONSTANT_4D
            dy_0 = dy0 - SQUISH_CONSTANT_4D
            dz_0 = dz0 - SQUISH_CONSTANT_4D
            dw_0 = dw0 - SQUISH_CONSTANT_4D
            dx_1 = dx0 - 2 * SQUISH_CONSTANT_4D
            dy_1 = dy0 - 2 * SQUISH_CONSTANT_4D
            dz_1 = dz0 - 2 * SQUISH_CONSTANT_4D
            dw_1 = dw0 - 2 * SQUISH_CONSTANT_4D
            if (c1 & 0x01) != 0:
                xsv0 += 1
                dx_0 -= 1
                xsv1 += 2
                dx_1 -= 2
            elif (c1 & 0x02) != 0:
                ysv0 += 1
                dy_0 -= 1
                ysv1 += 2
                dy_1 -= 2
            elif (c1 & 0x04) != 0:
                zsv0 += 1
                dz_0 -= 1
                zsv1 += 2
                dz_1 -= 2
            else:
                wsv0 += 1
                dw_0 -= 1
                wsv1 += 2
                dw_1 -= 2

            ext0 = (xsv0, ysv0, zsv0, wsv0, dx_0, dy_0, dz_0, dw_0)
            ext1 = (xsv1, ysv1, zsv1, wsv1, dx_1, dy_1, dz_1, dw_1)
            ext2 = vertex_one_one_one_minus_one(a_point | b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        else:
            # Both on the smaller side: (1,1,1,1) plus two from the shared axes.
            ext0, ext1 = pair_ones_to_two(a_point & b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
            ext2 = (xsb + 1, ysb + 1, zsb + 1, wsb + 1,
                    dx0 - 1 - 4 * SQUISH_CONSTANT_4D,
                    dy0 - 1 - 4 * SQUISH_CONSTANT_4D,
                    dz0 - 1 - 4 * SQUISH_CONSTANT_4D,
                    dw0 - 1 - 4 * SQUISH_CONSTANT_4D)
    else:
        if a_big:
            c1, c2 = a_point, b_point
        else:
            c1, c2 = b_point, a_point
        ext0, ext1 = pair_ones_to_two(c1, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        ext2 = vertex_one_one_one_minus_one(c2, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
    return ext0, ext1, ext2


# --- Fixed vertex groups ------------------------------------------------------

@njit(inline='always', cache=True)
def add_one_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """(1,0,0,0), (0,1,0,0), (0,0,1,0), (0,0,0,1) in that order."""
    dx1 = dx0 - 1 - SQUISH_CONSTANT_4D
    dy1 = dy0 - 0 - SQUISH_CONSTANT_4D
    dz1 = dz0 - 0 - SQUISH_CONSTANT_4D
    dw1 = dw0 - 0 - SQUISH_CONSTANT_4D
    value += contribution4(perm, xsb + 1, ysb, zsb, wsb, dx1, dy1, dz1, dw1)

    dx2 = dx0 - 0 - SQUISH_CONSTANT_4D
    dy2 = dy0 - 1 - SQUISH_CONSTANT_4D
    dz2 = dz1
    dw2 = dw1
    value += contribution4(perm, xsb, ysb + 1, zsb, wsb, dx2, dy2, dz2, dw2)

    dx3 = dx2
    dy3 = dy1
    dz3 = dz0 - 1 - SQUISH_CONSTANT_4D
    dw3 = dw1
    value += contribution4(perm, xsb, ysb, zsb + 1, wsb, dx3, dy3, dz3, dw3)

    dx4 = dx2
    dy4 = dy1
    dz4 = dz1
    dw4 = dw0 - 1 - SQUISH_CONSTANT_4D
    value += contribution4(perm, xsb, ysb, zsb, wsb + 1, dx4, dy4, dz4, dw4)
    return value


@njit(inline='always', cache=True)
def add_one_cold_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """(1,1,1,0), (1,1,0,1), (1,0,1,1), (0,1,1,1) in that order."""
    dx4 = dx0 - 1 - 3 * SQUISH_CONSTANT_4D
    dy4 = dy0 - 1 - 3 * SQUISH_CONSTANT_4D
    dz4 = dz0 - 1 - 3 * SQUISH_CONSTANT_4D
    dw4 = dw0 - 3 * SQUISH_CONSTANT_4D
    value += contribution4(perm, xsb + 1, ysb + 1, zsb + 1, wsb, dx4, dy4, dz4, dw4)

    dx3 = dx4
    dy3 = dy4
    dz3 = dz0 - 3 * SQUISH_CONSTANT_4D
    dw3 = dw0 - 1 - 3 * SQUISH_CONSTANT_4D
    value += contribution4(perm, xsb + 1, ysb + 1, zsb, wsb + 1, dx3, dy3, dz3, dw3)

    dx2 = dx4
    dy2 = dy0 - 3 * SQUISH_CONSTANT_4D
    dz2 = dz4
    dw2 = dw3
    value += contribution4(perm, xsb + 1, ysb, zsb + 1, wsb + 1, dx2, dy2, dz2, dw2)

    dx1 = dx0 - 3 * SQUISH_CONSTANT_4D
    dy1 = dy4
    dz1 = dz4
    dw1 = dw3
    value += contribution4(perm, xsb, ysb + 1, zsb + 1, wsb + 1, dx1, dy1, dz1, dw1)
    return value


@njit(inline='always', cache=True)
def add_two_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0):
    """The six vertices with exactly two coordinates set."""
    # (1,1,0,0)
    value += contribution4(perm, xsb + 1, ysb + 1, zsb, wsb,
                           dx0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 0 - 2 * SQUISH_CONSTANT_4D)
    # (1,0,1,0)
    value += contribution4(perm, xsb + 1, ysb, zsb + 1, wsb,
                           dx0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 0 - 2 * SQUISH_CONSTANT_4D)
    # (1,0,0,1)
    value += contribution4(perm, xsb + 1, ysb, zsb, wsb + 1,
                           dx0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 1 - 2 * SQUISH_CONSTANT_4D)
    # (0,1,1,0)
    value += contribution4(perm, xsb, ysb + 1, zsb + 1, wsb,
                           dx0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 0 - 2 * SQUISH_CONSTANT_4D)
    # (0,1,0,1)
    value += contribution4(perm, xsb, ysb + 1, zsb, wsb + 1,
                           dx0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 1 - 2 * SQUISH_CONSTANT_4D)
    # (0,0,1,1)
    value += contribution4(perm, xsb, ysb, zsb + 1, wsb + 1,
                           dx0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dy0 - 0 - 2 * SQUISH_CONSTANT_4D,
                           dz0 - 1 - 2 * SQUISH_CONSTANT_4D,
                           dw0 - 1 - 2 * SQUISH_CONSTANT_4D)
    return value


# --- Evaluation ---------------------------------------------------------------

@njit(cache=True)
def noise4(x, y, z, w, perm):
    # Place input coordinates on the simplectic honeycomb.
    stretch_offset = (x + y + z + w) * STRETCH_CONSTANT_4D
    xs = x + stretch_offset
    ys = y + stretch_offset
    zs = z + stretch_offset
    ws = w + stretch_offset

    if not (np.isfinite(xs) and np.isfinite(ys) and np.isfinite(zs) and np.isfinite(ws)):
        return xs + ys + zs + ws

    # Rhombo-hypercube super-cell origin.
    xsb = int(np.floor(xs))
    ysb = int(np.floor(ys))
    zsb = int(np.floor(zs))
    wsb = int(np.floor(ws))

    squish_offset = (xsb + ysb + zsb + wsb) * SQUISH_CONSTANT_4D
    xb = xsb + squish_offset
    yb = ysb + squish_offset
    zb = zsb + squish_offset
    wb = wsb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    zins = zs - zsb
    wins = ws - wsb
    in_sum = xins + yins + zins + wins

    dx0 = x - xb
    dy0 = y - yb
    dz0 = z - zb
    dw0 = w - wb

    value = 0.0
    if in_sum <= 1:
        # Pentachoron at (0,0,0,0)
        a_point, a_score, b_point, b_score = closest_pair_lower(xins, yins, zins, wins)
        uins = 1 - in_sum
        if uins > a_score or uins > b_score:
            c = b_point if b_score > a_score else a_point
            ext0, ext1, ext2 = extras_lower_with_origin(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        else:
            ext0, ext1, ext2 = extras_lower_without_origin(
                a_point | b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

        # (0,0,0,0)
        value += contribution4(perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        value = add_one_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

    elif in_sum >= 3:
        # Pentachoron at (1,1,1,1)
        a_point, a_score, b_point, b_score = closest_pair_upper(xins, yins, zins, wins)
        uins = 4 - in_sum
        if uins < a_score or uins < b_score:
            c = b_point if b_score < a_score else a_point
            ext0, ext1, ext2 = extras_upper_with_corner(c, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        else:
            ext0, ext1, ext2 = extras_upper_without_corner(
                a_point & b_point, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

        value = add_one_cold_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

        # (1,1,1,1)
        value += contribution4(perm, xsb + 1, ysb + 1, zsb + 1, wsb + 1,
                               dx0 - 1 - 4 * SQUISH_CONSTANT_4D,
                               dy0 - 1 - 4 * SQUISH_CONSTANT_4D,
                               dz0 - 1 - 4 * SQUISH_CONSTANT_4D,
                               dw0 - 1 - 4 * SQUISH_CONSTANT_4D)

    elif in_sum <= 2:
        # First rectified 4-simplex
        a_point, a_big, b_point, b_big = closest_pair_first_rectified(xins, yins, zins, wins, in_sum)
        ext0, ext1, ext2 = extras_first_rectified(
            a_point, a_big, b_point, b_big, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

        value = add_one_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        value = add_two_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

    else:
        # Second rectified 4-simplex
        a_point, a_big, b_point, b_big = closest_pair_second_rectified(xins, yins, zins, wins, in_sum)
        ext0, ext1, ext2 = extras_second_rectified(
            a_point, a_big, b_point, b_big, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

        value = add_one_cold_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)
        value = add_two_hot_vertices(value, perm, xsb, ysb, zsb, wsb, dx0, dy0, dz0, dw0)

    xsv, ysv, zsv, wsv, dx, dy, dz, dw = ext0
    value += contribution4(perm, xsv, ysv, zsv, wsv, dx, dy, dz, dw)
    xsv, ysv, zsv, wsv, dx, dy, dz, dw = ext1
    value += contribution4(perm, xsv, ysv, zsv, wsv, dx, dy, dz, dw)
    xsv, ysv, zsv, wsv, dx, dy, dz, dw = ext2
    value += contribution4(perm, xsv, ysv, zsv, wsv, dx, dy, dz, dw)

    return value / NORM_CONSTANT_4D


@njit(cache=True, parallel=True)
def noise4_array(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray, ws: np.ndarray,
                 perm: np.ndarray) -> np.ndarray:
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        output[i] = noise4(xs[i], ys[i], zs[i], ws[i], perm)
    return output
