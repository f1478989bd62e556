# ========================
# file: lattice_noise/settings/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
import logging
from typing import Any, Dict, Union, Mapping

from .defaults import DEFAULT_SETTINGS
from .model import NoiseSettings
from .registry import resolve_settings_path
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_settings(
    source: Union[str, Dict[str, Any]], overrides: Mapping[str, Any] | None = None
) -> NoiseSettings:
    """Load settings from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: settings id (e.g., 'terrain/continents'), or file path to JSON, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        NoiseSettings (immutable dataclass)
    """
    if isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_settings_path(source)
            data = _load_json_file(path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_SETTINGS, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    settings = NoiseSettings(
        id=merged["id"],
        seed=int(merged["seed"]),
        precision=str(merged["precision"]),
        normalized=bool(merged["normalized"]),
        fbm=dict(merged["fbm"]),
        raw=merged,
    )
    logger.debug("Loaded settings '%s' (seed=%d, precision=%s)",
                 settings.id, settings.seed, settings.precision)
    return settings
