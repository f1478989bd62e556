# ========================
# file: lattice_noise/settings/validators.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from .defaults import PRECISIONS
from .errors import ValidationError


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validate a merged settings dict.

    Raises ValidationError on the first failing check.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "settings.id must be non-empty string",
    )
    seed = cfg.get("seed")
    _require(
        isinstance(seed, int) and not isinstance(seed, bool),
        "settings.seed must be an integer",
    )
    _require(
        cfg.get("precision") in PRECISIONS,
        f"settings.precision must be one of {', '.join(PRECISIONS)}",
    )
    _require(isinstance(cfg.get("normalized"), bool), "settings.normalized must be bool")

    fbm = cfg.get("fbm")
    _require(isinstance(fbm, dict), "settings.fbm must be an object")
    octaves = fbm.get("octaves")
    _require(
        isinstance(octaves, int) and not isinstance(octaves, bool) and octaves >= 1,
        "fbm.octaves must be an integer >= 1",
    )
    for key in ("frequency", "lacunarity"):
        _require(float(fbm.get(key, 0.0)) > 0.0, f"fbm.{key} must be > 0")
    _require(float(fbm.get("gain", -1.0)) >= 0.0, "fbm.gain must be >= 0")
    _require(isinstance(fbm.get("ridge"), bool), "fbm.ridge must be bool")
