# ========================
# file: lattice_noise/settings/registry.py
# ========================
from __future__ import annotations
from typing import List
import os
from .errors import NotFoundError


# Search roots; the bundled presets/ folder first, extendable by the app.
_DEFAULT_SETTINGS_FOLDERS: List[str] = [
    os.path.join(os.path.dirname(os.path.dirname(__file__)), "presets"),
]


def resolve_settings_path(settings_id: str) -> str:
    """Map an id like 'terrain/continents' to a JSON file path in a presets tree."""
    rel = settings_id.replace("\\", "/").strip("/") + ".json"
    for root in _DEFAULT_SETTINGS_FOLDERS:
        candidate = os.path.join(root, rel)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(f"Settings id '{settings_id}' not found in presets/ folders")


def add_search_folder(path: str) -> None:
    path = os.path.abspath(path)
    if path not in _DEFAULT_SETTINGS_FOLDERS:
        _DEFAULT_SETTINGS_FOLDERS.append(path)
