# lattice_noise/numerics/extrapolate.py
from __future__ import annotations
from numba import njit

from ..core.constants import GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D


@njit(inline='always', cache=True)
def extrapolate2(perm, xsb, ysb, dx, dy):
    index = perm[(perm[xsb & 0xFF] + ysb) & 0xFF] & 0x0E
    return GRADIENTS_2D[index] * dx + GRADIENTS_2D[index + 1] * dy


@njit(inline='always', cache=True)
def extrapolate3(perm, grad_index, xsb, ysb, zsb, dx, dy, dz):
    index = grad_index[(perm[(perm[xsb & 0xFF] + ysb) & 0xFF] + zsb) & 0xFF]
    return (GRADIENTS_3D[index] * dx
            + GRADIENTS_3D[index + 1] * dy
            + GRADIENTS_3D[index + 2] * dz)


@njit(inline='always', cache=True)
def extrapolate4(perm, xsb, ysb, zsb, wsb, dx, dy, dz, dw):
    index = perm[(perm[(perm[(perm[xsb & 0xFF] + ysb) & 0xFF] + zsb) & 0xFF] + wsb) & 0xFF] & 0xFC
    return (GRADIENTS_4D[index] * dx
            + GRADIENTS_4D[index + 1] * dy
            + GRADIENTS_4D[index + 2] * dz
            + GRADIENTS_4D[index + 3] * dw)


# --- Attenuated contributions: attn^4 * extrapolation, zero outside radius ---

@njit(inline='always', cache=True)
def contribution2(perm, xsv, ysv, dx, dy):
    attn = 2 - dx * dx - dy * dy
    if attn > 0:
        attn *= attn
        return attn * attn * extrapolate2(perm, xsv, ysv, dx, dy)
    return 0.0


@njit(inline='always', cache=True)
def contribution3(perm, grad_index, xsv, ysv, zsv, dx, dy, dz):
    attn = 2 - dx * dx - dy * dy - dz * dz
    if attn > 0:
        attn *= attn
        return attn * attn * extrapolate3(perm, grad_index, xsv, ysv, zsv, dx, dy, dz)
    return 0.0


@njit(inline='always', cache=True)
def contribution4(perm, xsv, ysv, zsv, wsv, dx, dy, dz, dw):
    attn = 2 - dx * dx - dy * dy - dz * dz - dw * dw
    if attn > 0:
        attn *= attn
        return attn * attn * extrapolate4(perm, xsv, ysv, zsv, wsv, dx, dy, dz, dw)
    return 0.0
