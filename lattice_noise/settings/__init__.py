# ========================
# file: lattice_noise/settings/__init__.py
# ========================
from .defaults import DEFAULT_SETTINGS
from .errors import NotFoundError, SettingsError, ValidationError
from .factory import build_noise
from .loader import deep_merge, load_settings
from .model import NoiseSettings
from .registry import add_search_folder, resolve_settings_path
from .validators import validate_dict

__all__ = [
    "DEFAULT_SETTINGS",
    "NoiseSettings",
    "SettingsError",
    "ValidationError",
    "NotFoundError",
    "build_noise",
    "deep_merge",
    "load_settings",
    "add_search_folder",
    "resolve_settings_path",
    "validate_dict",
]
