# ========================
# file: lattice_noise/settings/factory.py
# ========================
from __future__ import annotations
import logging

from ..adapters import NormalizedOpenSimplex, NormalizedOpenSimplex32, OpenSimplex32
from ..noise import OpenSimplex
from .model import NoiseSettings

logger = logging.getLogger(__name__)


def build_noise(settings: NoiseSettings):
    """Return the evaluator matching the precision and normalisation of `settings`."""
    core = OpenSimplex(settings.seed)
    single = settings.precision == "float32"
    if settings.normalized:
        noise = NormalizedOpenSimplex32(core) if single else NormalizedOpenSimplex(core)
    else:
        noise = OpenSimplex32(core) if single else core
    logger.debug("Built %s for settings '%s'", type(noise).__name__, settings.id)
    return noise
