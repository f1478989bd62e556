# ========================
# file: lattice_noise/settings/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..core.constants import DEFAULT_SEED

PRECISIONS = ("float64", "float32")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "id": "default",
    "seed": DEFAULT_SEED,
    "precision": "float64",
    "normalized": False,
    "fbm": {
        "octaves": 1,
        "frequency": 1.0,
        "lacunarity": 2.0,
        "gain": 0.5,
        "ridge": False,
    },
}
