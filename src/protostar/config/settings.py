"""Where: src/protostar/config/settings.py
What: Constants shared by the icon pipeline and the desktop entry index.
Why: Keep magic values in one place without pulling in file I/O.
"""

from __future__ import annotations

from typing import Final

# Icon resolution -------------------------------------------------------------

# Descending ladder of standard theme sizes tried after the preferred size.
ICON_SIZES: Final[tuple[int, ...]] = (512, 256, 128, 64, 48, 32, 24)

# Theme used when no theme is configured or detection fails.
DEFAULT_ICON_THEME: Final[str] = "hicolor"

# Size the launcher asks for when the caller does not say otherwise.
DEFAULT_ICON_SIZE: Final[int] = 128


# On-disk cache ---------------------------------------------------------------

CACHE_DIR_NAME: Final[str] = "protostar_icon_cache"
CACHE_FILE_NAME: Final[str] = "imagecache.map"


# Desktop entries -------------------------------------------------------------

DESKTOP_ENTRY_EXTENSION: Final[str] = ".desktop"
APPLICATIONS_DIR_NAME: Final[str] = "applications"


__all__ = [
    "APPLICATIONS_DIR_NAME",
    "CACHE_DIR_NAME",
    "CACHE_FILE_NAME",
    "DEFAULT_ICON_SIZE",
    "DEFAULT_ICON_THEME",
    "DESKTOP_ENTRY_EXTENSION",
    "ICON_SIZES",
]
