# ==============================================================================
# File: lattice_noise/noise.py
# Purpose: Seeded evaluator. Builds the permutation tables once and routes
#          scalar and array queries to the compiled lattice kernels.
# ==============================================================================
from __future__ import annotations
import logging

import numpy as np

from .core.constants import DEFAULT_SEED
from .core.permutation import PermutationState, build_permutation
from .numerics.lattice_2d import noise2, noise2_array
from .numerics.lattice_3d import noise3, noise3_array
from .numerics.lattice_4d import noise4, noise4_array

logger = logging.getLogger(__name__)


def _flatten(*coords) -> tuple[tuple[int, ...], list[np.ndarray]]:
    """Broadcast coordinate arrays and lay each out as flat contiguous float64."""
    arrays = np.broadcast_arrays(*(np.asarray(c, dtype=np.float64) for c in coords))
    shape = arrays[0].shape
    flat = [np.ascontiguousarray(a, dtype=np.float64).ravel() for a in arrays]
    return shape, flat


class OpenSimplex:
    """Raw OpenSimplex noise for a fixed seed.

    Results are un-normalised float64 values, roughly in [-1, 1]. The instance
    holds nothing but the read-only permutation tables, so it can be shared
    freely between threads.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._seed = int(seed)
        self._state = build_permutation(self._seed)
        logger.debug("OpenSimplex evaluator ready (seed=%d)", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def permutation(self) -> PermutationState:
        return self._state

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"

    # --- scalar ---

    def eval2(self, x: float, y: float) -> float:
        return noise2(float(x), float(y), self._state.perm)

    def eval3(self, x: float, y: float, z: float) -> float:
        return noise3(float(x), float(y), float(z),
                      self._state.perm, self._state.perm_grad_index_3d)

    def eval4(self, x: float, y: float, z: float, w: float) -> float:
        return noise4(float(x), float(y), float(z), float(w), self._state.perm)

    # --- arrays ---

    def eval2_array(self, x, y) -> np.ndarray:
        shape, (xs, ys) = _flatten(x, y)
        return noise2_array(xs, ys, self._state.perm).reshape(shape)

    def eval3_array(self, x, y, z) -> np.ndarray:
        shape, (xs, ys, zs) = _flatten(x, y, z)
        out = noise3_array(xs, ys, zs, self._state.perm, self._state.perm_grad_index_3d)
        return out.reshape(shape)

    def eval4_array(self, x, y, z, w) -> np.ndarray:
        shape, (xs, ys, zs, ws) = _flatten(x, y, z, w)
        return noise4_array(xs, ys, zs, ws, self._state.perm).reshape(shape)


def new(seed: int = DEFAULT_SEED) -> OpenSimplex:
    """Construct an evaluator for `seed`. Every seed is valid."""
    return OpenSimplex(seed)
