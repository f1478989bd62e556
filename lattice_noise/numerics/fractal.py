# lattice_noise/numerics/fractal.py
from __future__ import annotations
import numpy as np
from numba import njit, prange

from .lattice_2d import noise2
from .lattice_3d import noise3
from .lattice_4d import noise4


@njit(cache=True)
def fbm_amplitude(gain: float, octaves: int) -> float:
    if gain == 1.0:
        return float(octaves)
    return (1.0 - gain ** octaves) / (1.0 - gain)


@njit(inline='always', cache=True)
def _ridge(sample: float) -> float:
    return (1.0 - abs(sample)) * 2.0 - 1.0


@njit(cache=True, parallel=True)
def fbm2_array(xs: np.ndarray, ys: np.ndarray, perm: np.ndarray,
               freq0: float, octaves: int, lacunarity: float = 2.0,
               gain: float = 0.5, ridge: bool = False) -> np.ndarray:
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        amp, freq, total = 1.0, freq0, 0.0
        for _ in range(octaves):
            sample = noise2(xs[i] * freq, ys[i] * freq, perm)
            if ridge:
                sample = _ridge(sample)
            total += amp * sample
            freq *= lacunarity
            amp *= gain
        output[i] = total

    max_amp = fbm_amplitude(gain, octaves)
    if max_amp > 1e-6:
        output /= max_amp
    return output


@njit(cache=True, parallel=True)
def fbm3_array(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray,
               perm: np.ndarray, grad_index: np.ndarray,
               freq0: float, octaves: int, lacunarity: float = 2.0,
               gain: float = 0.5, ridge: bool = False) -> np.ndarray:
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        amp, freq, total = 1.0, freq0, 0.0
        for _ in range(octaves):
            sample = noise3(xs[i] * freq, ys[i] * freq, zs[i] * freq, perm, grad_index)
            if ridge:
                sample = _ridge(sample)
            total += amp * sample
            freq *= lacunarity
            amp *= gain
        output[i] = total

    max_amp = fbm_amplitude(gain, octaves)
    if max_amp > 1e-6:
        output /= max_amp
    return output


@njit(cache=True, parallel=True)
def fbm4_array(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray, ws: np.ndarray,
               perm: np.ndarray,
               freq0: float, octaves: int, lacunarity: float = 2.0,
               gain: float = 0.5, ridge: bool = False) -> np.ndarray:
    n = xs.shape[0]
    output = np.empty(n, dtype=np.float64)
    for i in prange(n):
        amp, freq, total = 1.0, freq0, 0.0
        for _ in range(octaves):
            sample = noise4(xs[i] * freq, ys[i] * freq, zs[i] * freq, ws[i] * freq, perm)
            if ridge:
                sample = _ridge(sample)
            total += amp * sample
            freq *= lacunarity
            amp *= gain
        output[i] = total

    max_amp = fbm_amplitude(gain, octaves)
    if max_amp > 1e-6:
        output /= max_amp
    return output
