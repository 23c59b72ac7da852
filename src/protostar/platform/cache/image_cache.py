"""Persistent name/size to source-path table for resolved icons."""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, final

from protostar.config.file_ops import replace_text_file, toml_quote
from protostar.config.paths import default_cache_file
from protostar.platform.logging import logger

CacheKey = tuple[str, int]

_HEADER = (
    "# Protostar icon cache",
    "#",
    "# Maps an icon name and requested pixel size to the source file it resolved to.",
    "# Safe to delete; it is rebuilt as icons are resolved.",
)


@final
class ImageCache:
    """Write-through cache of resolved icon source paths.

    All reads and writes go through one lock, so an ``insert_and_persist``
    is fully visible to the next ``lookup`` from any thread.
    """

    path: Path
    _entries: dict[CacheKey, Path]
    _lock: threading.Lock

    def __init__(self, path: Path, entries: Mapping[CacheKey, Path] | None = None) -> None:
        """Initialize the cache.

        Args:
            path: Snapshot file rewritten on every insertion.
            entries: Initial table contents.
        """
        self.path = path
        self._entries = dict(entries or {})
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: Path | None = None) -> "ImageCache":
        """Read the snapshot at ``path``.

        Missing, unreadable or malformed files produce an empty cache; this
        never raises.
        """
        target = path or default_cache_file()
        try:
            with open(target, "rb") as handle:
                document = tomllib.load(handle)
        except FileNotFoundError:
            logger.debug("No icon cache at %s, starting empty", target)
            return cls(target)
        except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Discarding unreadable icon cache %s: %s", target, exc)
            return cls(target)

        entries = _extract_entries(document)
        logger.debug("Loaded %d icon cache entries from %s", len(entries), target)
        return cls(target, entries)

    def lookup(self, name: str, size: int) -> Path | None:
        """Return the cached source path for ``(name, size)``.

        The caller checks whether the path still exists.
        """
        with self._lock:
            return self._entries.get((name, size))

    def insert_and_persist(self, name: str, size: int, path: Path) -> bool:
        """Insert ``(name, size) -> path`` if absent and rewrite the snapshot.

        An entry whose path no longer exists counts as absent, so a fresh
        lookup replaces it. The table only changes once the snapshot is
        written.

        Returns:
            True if a new entry was written, False if the key was already
            present or the snapshot could not be written.
        """
        with self._lock:
            key = (name, size)
            current = self._entries.get(key)
            if current is not None and current.exists():
                return False
            updated = {**self._entries, key: path}
            try:
                replace_text_file(self.path, _render(updated))
            except OSError as e:
                logger.warning("Failed to persist icon cache %s: %s", self.path, e)
                return False
            self._entries = updated
        return True

    def snapshot(self) -> dict[CacheKey, Path]:
        """Return a copy of the table for inspection or testing."""

        with self._lock:
            return dict(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _render(entries: Mapping[CacheKey, Path]) -> str:
    lines: list[str] = [*_HEADER, ""]
    for (name, size), path in sorted(entries.items()):
        lines.append("[[entries]]")
        lines.append(f"name = {toml_quote(name)}")
        lines.append(f"size = {size}")
        lines.append(f"path = {toml_quote(str(path))}")
        lines.append("")
    return "\n".join(lines)


def _extract_entries(document: Mapping[str, Any]) -> dict[CacheKey, Path]:
    rows = document.get("entries", [])
    if not isinstance(rows, list):
        logger.warning("Icon cache 'entries' is not an array of tables; ignoring it")
        return {}

    entries: dict[CacheKey, Path] = {}
    for row in rows:
        if not isinstance(row, dict):
            continue
        name = row.get("name")
        size = row.get("size")
        path = row.get("path")
        if not isinstance(name, str) or not isinstance(path, str):
            continue
        if not isinstance(size, int) or isinstance(size, bool):
            continue
        _ = entries.setdefault((name, size), Path(path))
    return entries


__all__ = ["CacheKey", "ImageCache"]
