# ========================
# file: lattice_noise/settings/errors.py
# ========================
class SettingsError(Exception):
    """Base error for the noise settings system."""


class ValidationError(SettingsError):
    """Raised when a settings dict fails validation."""


class NotFoundError(SettingsError):
    """Raised when a settings id or path cannot be resolved."""
