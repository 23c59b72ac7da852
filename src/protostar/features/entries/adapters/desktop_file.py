"""Parse ``.desktop`` files into ``DesktopEntryRecord`` values with pyxdg."""

from __future__ import annotations

from pathlib import Path

from xdg.DesktopEntry import DesktopEntry
from xdg.Exceptions import ParsingError

from protostar.features.entries.domain.models import DesktopEntryParseError, DesktopEntryRecord


def _optional(value: str | None) -> str | None:
    """Strip whitespace and coerce blank strings to ``None``."""

    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def parse_desktop_file(path: Path) -> DesktopEntryRecord:
    """Read the ``[Desktop Entry]`` group of ``path``.

    Raises:
        DesktopEntryParseError: If the file is missing, unreadable or has no
            ``[Desktop Entry]`` group.
    """
    if not path.is_file():
        raise DesktopEntryParseError(f"Desktop entry not found: {path}")

    try:
        entry = DesktopEntry(str(path))
    except (ParsingError, OSError, UnicodeDecodeError) as exc:
        raise DesktopEntryParseError(f"Invalid desktop entry {path}: {exc}") from exc

    categories = tuple(c.strip() for c in entry.getCategories() if c and c.strip())
    return DesktopEntryRecord(
        path=path,
        name=_optional(entry.getName()),
        command=_optional(entry.getExec()),
        categories=categories,
        icon_name=_optional(entry.getIcon()),
        hidden=bool(entry.getNoDisplay() or entry.getHidden()),
    )


__all__ = ["parse_desktop_file"]
