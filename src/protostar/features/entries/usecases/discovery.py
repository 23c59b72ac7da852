"""Where: src/protostar/features/entries/usecases/discovery.py
What: Enumerate and load desktop entries from the XDG data directories.
Why: Produce the list of launchable applications the shell presents.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

from protostar.config.paths import data_dirs
from protostar.config.settings import APPLICATIONS_DIR_NAME, DESKTOP_ENTRY_EXTENSION
from protostar.features.entries.adapters.desktop_file import parse_desktop_file
from protostar.features.entries.domain.models import DesktopEntryParseError, DesktopEntryRecord
from protostar.platform.logging import logger


def application_dirs(env: Mapping[str, str] | None = None, home: Path | None = None) -> list[Path]:
    """Return the existing ``applications`` directory of each data dir."""

    return [
        directory / APPLICATIONS_DIR_NAME
        for directory in data_dirs(env, home)
        if (directory / APPLICATIONS_DIR_NAME).is_dir()
    ]


def iter_desktop_files(directories: list[Path]) -> Iterator[Path]:
    """Yield every desktop file below ``directories``, following symlinks.

    Files are yielded per directory in sorted order. Symlinked directory
    cycles are cut by tracking visited real paths.
    """
    for root in directories:
        visited: set[str] = set()
        for current, subdirs, files in os.walk(root, followlinks=True):
            real = os.path.realpath(current)
            if real in visited:
                subdirs.clear()
                continue
            visited.add(real)
            subdirs.sort()
            for filename in sorted(files):
                candidate = Path(current) / filename
                if candidate.suffix == DESKTOP_ENTRY_EXTENSION and candidate.is_file():
                    yield candidate


def load_desktop_entries(
    directories: list[Path] | None = None,
    *,
    parser: Callable[[Path], DesktopEntryRecord] = parse_desktop_file,
) -> list[DesktopEntryRecord]:
    """Parse every desktop file, skipping the ones that fail.

    Args:
        directories: Directories to scan; defaults to ``application_dirs()``.
        parser: Desktop file parser, replaceable in tests.

    Returns:
        list[DesktopEntryRecord]: Parsed records in discovery order.
    """
    roots = directories if directories is not None else application_dirs()
    records: list[DesktopEntryRecord] = []
    for path in iter_desktop_files(roots):
        try:
            records.append(parser(path))
        except DesktopEntryParseError as exc:
            logger.warning("Skipping desktop entry: %s", exc)
    logger.debug("Loaded %d desktop entries from %d directories", len(records), len(roots))
    return records


__all__ = ["application_dirs", "iter_desktop_files", "load_desktop_entries"]
