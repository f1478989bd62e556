# ==============================================================================
# File: lattice_noise/core/permutation.py
# Purpose: Seeded permutation tables shared by every lattice evaluation.
# ==============================================================================
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from .constants import (
    GRADIENT_LEN_OVER_3,
    LCG_INCREMENT,
    LCG_MULTIPLIER,
    PERM_SIZE,
)

logger = logging.getLogger(__name__)

_U64 = 1 << 64
_I64_MIN = -(1 << 63)


def i64(n: int) -> int:
    """Wrap an arbitrary Python int to signed 64-bit two's complement."""
    return ((n - _I64_MIN) % _U64) + _I64_MIN


def lcg_step(state: int) -> int:
    return i64(state * LCG_MULTIPLIER + LCG_INCREMENT)


def trunc_rem(a: int, n: int) -> int:
    """Remainder that keeps the sign of the dividend (fixed-width `%`)."""
    r = abs(a) % n
    return -r if a < 0 else r


@dataclass(frozen=True)
class PermutationState:
    perm: np.ndarray
    perm_grad_index_3d: np.ndarray


def build_permutation(seed: int) -> PermutationState:
    """Builds the permutation table and the derived 3D gradient index table.

    Every seed is valid. The shuffle draws one slot per position from the top
    down and overwrites the drawn slot with the current top, so the result is
    a true permutation rather than a sequence of pair swaps.
    """
    perm = np.zeros(PERM_SIZE, dtype=np.int32)
    grad_index = np.zeros(PERM_SIZE, dtype=np.int32)
    source = list(range(PERM_SIZE))

    state = i64(seed)
    for _ in range(3):
        state = lcg_step(state)

    for i in range(PERM_SIZE - 1, -1, -1):
        state = lcg_step(state)
        r = trunc_rem(i64(state + 31), i + 1)
        if r < 0:
            r += i + 1
        perm[i] = source[r]
        grad_index[i] = (perm[i] % GRADIENT_LEN_OVER_3) * 3
        source[r] = source[i]

    perm.flags.writeable = False
    grad_index.flags.writeable = False
    logger.debug("Permutation table built for seed %d", seed)
    return PermutationState(perm=perm, perm_grad_index_3d=grad_index)
