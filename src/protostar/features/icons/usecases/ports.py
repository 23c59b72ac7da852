"""
Summary: Ports defining icon resolver dependencies.
Why: Decouple the resolver from concrete adapters so tests and swaps stay simple.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageCachePort(Protocol):
    """Port for the persistent name/size to source-path cache."""

    def lookup(self, name: str, size: int) -> Path | None:
        """Return the cached source path, if any."""
        ...

    def insert_and_persist(self, name: str, size: int, path: Path) -> bool:
        """Insert a new entry and rewrite the snapshot."""
        ...


@runtime_checkable
class ThemeLookupPort(Protocol):
    """Port for icon-theme index queries."""

    def find(
        self,
        name: str,
        size: int,
        theme: str,
        greedy: bool = True,
        extensions: Sequence[str] | None = None,
    ) -> Path | None:
        """Return the theme's file for ``name`` near ``size``."""
        ...


@runtime_checkable
class RasterizerPort(Protocol):
    """Port for vector to raster conversion."""

    def vector_to_raster(self, source_path: Path, target_size: int) -> Path:
        """Return a bitmap rendering of ``source_path``."""
        ...


__all__ = ["ImageCachePort", "RasterizerPort", "ThemeLookupPort"]
