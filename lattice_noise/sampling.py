# ==============================================================================
# File: lattice_noise/sampling.py
# Purpose: Fractal (fBm) sampling of a seeded evaluator over coordinate arrays.
# ==============================================================================
from __future__ import annotations
import logging
from typing import Union

import numpy as np

from .adapters import F32, NormalizedOpenSimplex, NormalizedOpenSimplex32, OpenSimplex32
from .core.constants import NORMALIZE_OFFSET, NORMALIZE_SCALE
from .noise import OpenSimplex, _flatten
from .numerics.fractal import fbm2_array, fbm3_array, fbm4_array
from .settings.factory import build_noise

logger = logging.getLogger(__name__)

Evaluator = Union[OpenSimplex, OpenSimplex32, NormalizedOpenSimplex, NormalizedOpenSimplex32]


def _core_of(noise: Evaluator) -> OpenSimplex:
    return noise if isinstance(noise, OpenSimplex) else noise.base


def fbm(
    noise: Evaluator,
    *coords,
    octaves: int = 4,
    frequency: float = 1.0,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    ridge: bool = False,
) -> np.ndarray:
    """Sum `octaves` layers of noise over 2, 3 or 4 coordinate arrays.

    Each octave samples at `coords * freq` with weight `amp`; after every
    octave `freq *= lacunarity` and `amp *= gain`. With `ridge` each sample
    is folded to `(1 - |s|) * 2 - 1`. The total is divided by the summed
    amplitudes, so the result keeps the range of a single octave.

    The adapter kind of `noise` decides the output: 32-bit adapters narrow
    inputs and the result, normalised adapters remap it to [0, 1].
    """
    if not 2 <= len(coords) <= 4:
        raise ValueError(f"fbm takes 2, 3 or 4 coordinate arrays, got {len(coords)}")
    if int(octaves) < 1:
        raise ValueError("octaves must be >= 1")

    single = isinstance(noise, OpenSimplex32)
    if single:
        coords = tuple(np.asarray(c, dtype=F32).astype(np.float64) for c in coords)

    state = _core_of(noise).permutation
    shape, flat = _flatten(*coords)
    args = (float(frequency), int(octaves), float(lacunarity), float(gain), bool(ridge))

    if len(flat) == 2:
        out = fbm2_array(flat[0], flat[1], state.perm, *args)
    elif len(flat) == 3:
        out = fbm3_array(flat[0], flat[1], flat[2], state.perm, state.perm_grad_index_3d, *args)
    else:
        out = fbm4_array(flat[0], flat[1], flat[2], flat[3], state.perm, *args)
    out = out.reshape(shape)

    if isinstance(noise, (NormalizedOpenSimplex, NormalizedOpenSimplex32)):
        out = (out + NORMALIZE_OFFSET) * NORMALIZE_SCALE
    if single:
        out = out.astype(F32)

    logger.debug("fbm%dd: %d samples, %d octaves", len(flat), out.size, int(octaves))
    return out


def render(settings, *coords) -> np.ndarray:
    """Build the evaluator described by `settings` and sample its fBm."""
    noise = build_noise(settings)
    params = dict(settings.fbm)
    return fbm(
        noise,
        *coords,
        octaves=int(params["octaves"]),
        frequency=float(params["frequency"]),
        lacunarity=float(params["lacunarity"]),
        gain=float(params["gain"]),
        ridge=bool(params["ridge"]),
    )
