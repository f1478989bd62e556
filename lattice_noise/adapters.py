# ==============================================================================
# File: lattice_noise/adapters.py
# Purpose: Output adapters over the core evaluator (32-bit cast, [0, 1] remap).
#          Each adapter keeps only a reference to a core OpenSimplex.
# ==============================================================================
from __future__ import annotations

import numpy as np

from .core.constants import DEFAULT_SEED, NORMALIZE_OFFSET, NORMALIZE_SCALE
from .noise import OpenSimplex

F32 = np.float32


def _narrow(value: float) -> float:
    """Round a float64 through float32 and back."""
    return float(F32(value))


def _narrow_array(values) -> np.ndarray:
    return np.asarray(values, dtype=F32).astype(np.float64)


def _normalize(r):
    return (r + NORMALIZE_OFFSET) * NORMALIZE_SCALE


class OpenSimplex32:
    """Single-precision view of a core evaluator.

    Inputs are narrowed to float32, evaluated by the float64 core and the
    result is narrowed to float32 again.
    """

    def __init__(self, base: OpenSimplex):
        self.base = base

    @property
    def seed(self) -> int:
        return self.base.seed

    def eval2(self, x, y) -> np.float32:
        return F32(self.base.eval2(_narrow(x), _narrow(y)))

    def eval3(self, x, y, z) -> np.float32:
        return F32(self.base.eval3(_narrow(x), _narrow(y), _narrow(z)))

    def eval4(self, x, y, z, w) -> np.float32:
        return F32(self.base.eval4(_narrow(x), _narrow(y), _narrow(z), _narrow(w)))

    def eval2_array(self, x, y) -> np.ndarray:
        return self.base.eval2_array(_narrow_array(x), _narrow_array(y)).astype(F32)

    def eval3_array(self, x, y, z) -> np.ndarray:
        out = self.base.eval3_array(_narrow_array(x), _narrow_array(y), _narrow_array(z))
        return out.astype(F32)

    def eval4_array(self, x, y, z, w) -> np.ndarray:
        out = self.base.eval4_array(
            _narrow_array(x), _narrow_array(y), _narrow_array(z), _narrow_array(w)
        )
        return out.astype(F32)


class NormalizedOpenSimplex:
    """Remaps core output from roughly [-1, 1] to roughly [0, 1]."""

    def __init__(self, base: OpenSimplex):
        self.base = base

    @property
    def seed(self) -> int:
        return self.base.seed

    def eval2(self, x, y) -> float:
        return _normalize(self.base.eval2(x, y))

    def eval3(self, x, y, z) -> float:
        return _normalize(self.base.eval3(x, y, z))

    def eval4(self, x, y, z, w) -> float:
        return _normalize(self.base.eval4(x, y, z, w))

    def eval2_array(self, x, y) -> np.ndarray:
        return _normalize(self.base.eval2_array(x, y))

    def eval3_array(self, x, y, z) -> np.ndarray:
        return _normalize(self.base.eval3_array(x, y, z))

    def eval4_array(self, x, y, z, w) -> np.ndarray:
        return _normalize(self.base.eval4_array(x, y, z, w))


class NormalizedOpenSimplex32(OpenSimplex32):
    """Single-precision inputs and outputs with the [0, 1] remap applied in float64."""

    def eval2(self, x, y) -> np.float32:
        return F32(_normalize(self.base.eval2(_narrow(x), _narrow(y))))

    def eval3(self, x, y, z) -> np.float32:
        return F32(_normalize(self.base.eval3(_narrow(x), _narrow(y), _narrow(z))))

    def eval4(self, x, y, z, w) -> np.float32:
        return F32(_normalize(self.base.eval4(_narrow(x), _narrow(y), _narrow(z), _narrow(w))))

    def eval2_array(self, x, y) -> np.ndarray:
        out = self.base.eval2_array(_narrow_array(x), _narrow_array(y))
        return _normalize(out).astype(F32)

    def eval3_array(self, x, y, z) -> np.ndarray:
        out = self.base.eval3_array(_narrow_array(x), _narrow_array(y), _narrow_array(z))
        return _normalize(out).astype(F32)

    def eval4_array(self, x, y, z, w) -> np.ndarray:
        out = self.base.eval4_array(
            _narrow_array(x), _narrow_array(y), _narrow_array(z), _narrow_array(w)
        )
        return _normalize(out).astype(F32)


def new32(seed: int = DEFAULT_SEED) -> OpenSimplex32:
    return OpenSimplex32(OpenSimplex(seed))


def new_normalized(seed: int = DEFAULT_SEED) -> NormalizedOpenSimplex:
    return NormalizedOpenSimplex(OpenSimplex(seed))


def new_normalized32(seed: int = DEFAULT_SEED) -> NormalizedOpenSimplex32:
    return NormalizedOpenSimplex32(OpenSimplex(seed))
