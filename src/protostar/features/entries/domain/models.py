"""
Summary: Desktop entry record consumed by the icon resolver and launcher.
Why: Decouple the pipeline from the desktop file parser's own types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class DesktopEntryError(Exception):
    """Base exception for desktop entry loading failures."""


class DesktopEntryParseError(DesktopEntryError):
    """Raised when a file is not a readable desktop entry."""


@dataclass(frozen=True, slots=True)
class DesktopEntryRecord:
    """Resolved view of one ``.desktop`` file."""

    path: Path
    name: str | None = None
    command: str | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)
    icon_name: str | None = None
    hidden: bool = False

    @property
    def desktop_id(self) -> str:
        """File stem, e.g. ``org.mozilla.firefox``."""

        return self.path.stem

    @property
    def directory(self) -> Path:
        return self.path.parent


__all__ = ["DesktopEntryError", "DesktopEntryParseError", "DesktopEntryRecord"]
