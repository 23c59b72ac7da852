"""
Summary: Icon-theme index queries through pyxdg.
Why: Keep the external theme lookup behind one small, cache-free adapter.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from xdg.IconTheme import getIconPath

from protostar.platform.logging import logger

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = ("png", "svg")

_SIZE_SEGMENT: Final[re.Pattern[str]] = re.compile(r"^(\d+)(?:x(\d+))?(?:@\d+x?)?$")


def directory_size(path: Path) -> int | None:
    """Return the pixel size encoded in a theme path, if any.

    ``.../48x48/apps/foo.png`` and ``.../apps/48/foo.png`` report 48.
    """
    for segment in reversed(path.parent.parts):
        match = _SIZE_SEGMENT.match(segment)
        if match:
            return int(match.group(1))
    return None


def is_scalable(path: Path) -> bool:
    return "scalable" in path.parent.parts


@final
class ThemeLookup:
    """Query the system icon-theme index for a name, size and theme."""

    def find(
        self,
        name: str,
        size: int,
        theme: str,
        greedy: bool = True,
        extensions: Sequence[str] | None = None,
    ) -> Path | None:
        """Look ``name`` up in ``theme`` at ``size``.

        Args:
            name: Logical icon name, e.g. ``"firefox"``.
            size: Requested pixel size.
            theme: Theme directory name, e.g. ``"hicolor"``.
            greedy: Accept the closest available size instead of an exact match.
            extensions: File extensions to try, in order of preference.

        Returns:
            Path to the icon file, or None when the index has no match.
        """
        exts = list(extensions or DEFAULT_EXTENSIONS)
        found = getIconPath(name, size, theme, exts)
        if not found:
            return None

        path = Path(found)
        if not greedy and not is_scalable(path) and directory_size(path) != size:
            logger.debug("Rejecting non-exact theme hit %s for %s@%d", path, name, size)
            return None
        return path


__all__ = ["DEFAULT_EXTENSIONS", "ThemeLookup", "directory_size", "is_scalable"]
