"""Icon-theme lookup and current theme detection."""

from .detection import detect_icon_theme
from .lookup import ThemeLookup, directory_size, is_scalable

__all__ = ["ThemeLookup", "detect_icon_theme", "directory_size", "is_scalable"]
