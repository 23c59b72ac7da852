"""
Summary: Icon records, candidate origins and the same-name tie-break.
Why: Give resolver strategies and callers one immutable vocabulary.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from protostar.features.icons.domain.errors import UnrecognizedExtensionError


class IconKind(Enum):
    """Asset families the presentation layer knows how to place."""

    RASTER = "raster"
    VECTOR = "vector"
    MODEL_3D = "model3d"


class CandidateSource(Enum):
    """Which fallback step produced a candidate."""

    EXACT = "exact"
    CACHE = "cache"
    THEME = "theme"
    THEME_FALLBACK = "theme-fallback"


_EXTENSION_KINDS: Final[dict[str, IconKind]] = {
    ".png": IconKind.RASTER,
    ".svg": IconKind.VECTOR,
    ".glb": IconKind.MODEL_3D,
    ".gltf": IconKind.MODEL_3D,
}

RECOGNIZED_EXTENSIONS: Final[tuple[str, ...]] = tuple(_EXTENSION_KINDS)
MODEL_EXTENSIONS: Final[tuple[str, ...]] = ("glb", "gltf")
IMAGE_EXTENSIONS: Final[tuple[str, ...]] = ("png", "svg")


def kind_for_path(path: Path) -> IconKind:
    """Map a file extension to its icon kind.

    Raises:
        UnrecognizedExtensionError: If the suffix is not a known icon format.
    """
    kind = _EXTENSION_KINDS.get(path.suffix.lower())
    if kind is None:
        raise UnrecognizedExtensionError(path)
    return kind


@dataclass(frozen=True, slots=True)
class IconRecord:
    """A resolved icon asset at the size it was requested for."""

    kind: IconKind
    path: Path
    size: int

    @classmethod
    def from_path(cls, path: Path, size: int) -> "IconRecord":
        """Build a record from ``path``, classifying it by extension."""

        return cls(kind=kind_for_path(path), path=path, size=size)


@dataclass(frozen=True, slots=True)
class IconQuery:
    """Inputs shared by every candidate strategy for one resolution."""

    icon_name: str
    entry_dir: Path | None
    preferred_size: int
    prefer_3d: bool = False


@dataclass(frozen=True, slots=True)
class IconCandidate:
    """A raw candidate path plus where it came from.

    ``reported_size`` is the pixel size the source advertises; ``None`` means
    scalable (vector) and ranks above any fixed size.
    """

    path: Path
    source: CandidateSource
    reported_size: int | None = 0


def choose_icon(candidates: Iterable[IconCandidate], *, prefer_3d: bool = False) -> IconCandidate | None:
    """Pick one candidate from a set of same-named icons.

    With ``prefer_3d`` the first model candidate wins; otherwise the largest
    reported size wins, scalable sources counting as largest. Unrecognized
    files are ignored.
    """
    usable = [c for c in candidates if c.path.suffix.lower() in _EXTENSION_KINDS]
    if not usable:
        return None

    if prefer_3d:
        for candidate in usable:
            if kind_for_path(candidate.path) is IconKind.MODEL_3D:
                return candidate

    def _rank(candidate: IconCandidate) -> float:
        if candidate.reported_size is None:
            return float("inf")
        return float(candidate.reported_size)

    return max(usable, key=_rank)


__all__ = [
    "CandidateSource",
    "IMAGE_EXTENSIONS",
    "IconCandidate",
    "IconKind",
    "IconQuery",
    "IconRecord",
    "MODEL_EXTENSIONS",
    "RECOGNIZED_EXTENSIONS",
    "choose_icon",
    "kind_for_path",
]
