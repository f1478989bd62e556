# ========================
# file: lattice_noise/__init__.py
# ========================
from .noise import OpenSimplex, new
from .adapters import (
    NormalizedOpenSimplex,
    NormalizedOpenSimplex32,
    OpenSimplex32,
    new32,
    new_normalized,
    new_normalized32,
)
from .sampling import fbm, render
from .settings import NoiseSettings, build_noise, load_settings

__all__ = [
    "OpenSimplex",
    "OpenSimplex32",
    "NormalizedOpenSimplex",
    "NormalizedOpenSimplex32",
    "new",
    "new32",
    "new_normalized",
    "new_normalized32",
    "fbm",
    "render",
    "NoiseSettings",
    "build_noise",
    "load_settings",
]
