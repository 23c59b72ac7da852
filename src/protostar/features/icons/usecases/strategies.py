"""
Summary: Candidate-producing strategies for the icon fallback chain.
Why: Each lookup tier is a lazy generator so the resolver stops at the first usable hit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from PIL import Image

from protostar.features.icons.domain.models import (
    IMAGE_EXTENSIONS,
    MODEL_EXTENSIONS,
    RECOGNIZED_EXTENSIONS,
    CandidateSource,
    IconCandidate,
    IconKind,
    IconQuery,
    choose_icon,
    kind_for_path,
)
from protostar.features.icons.usecases.ports import ImageCachePort, ThemeLookupPort

CandidateStrategy = Callable[[IconQuery], Iterator[IconCandidate]]
ThemeProvider = Callable[[], str]


def _reported_size(path: Path) -> int | None:
    """Pixel width a file advertises; ``None`` for scalable sources."""

    kind = kind_for_path(path)
    if kind is IconKind.VECTOR:
        return None
    if kind is IconKind.MODEL_3D:
        return 0
    try:
        with Image.open(path) as image:
            return image.size[0]
    except OSError:
        return 0


def exact_path_candidates(query: IconQuery) -> Iterator[IconCandidate]:
    """Treat the icon name as a path relative to the entry's directory.

    Names without an icon extension also match same-named siblings such as
    ``name.png`` and ``name.svg``; the tie-break picks one of them.
    """
    base = query.entry_dir if query.entry_dir is not None else Path.cwd()
    candidate = base / query.icon_name
    if candidate.is_file():
        yield IconCandidate(candidate, CandidateSource.EXACT)
        return

    if candidate.suffix.lower() in RECOGNIZED_EXTENSIONS:
        return

    siblings = [
        candidate.with_name(candidate.name + extension)
        for extension in RECOGNIZED_EXTENSIONS
    ]
    found = [
        IconCandidate(path, CandidateSource.EXACT, _reported_size(path))
        for path in siblings
        if path.is_file()
    ]
    chosen = choose_icon(found, prefer_3d=query.prefer_3d)
    if chosen is not None:
        yield chosen


def cache_candidates(cache: ImageCachePort) -> CandidateStrategy:
    """Yield the cached source path when it still exists on disk."""

    def _strategy(query: IconQuery) -> Iterator[IconCandidate]:
        cached = cache.lookup(query.icon_name, query.preferred_size)
        if cached is not None and cached.exists():
            yield IconCandidate(cached, CandidateSource.CACHE)

    return _strategy


def _extension_groups(prefer_3d: bool) -> tuple[tuple[str, ...], ...]:
    if prefer_3d:
        return (MODEL_EXTENSIONS, IMAGE_EXTENSIONS)
    return (IMAGE_EXTENSIONS,)


def _theme_hits(
    lookup: ThemeLookupPort,
    query: IconQuery,
    size: int,
    theme: str,
    source: CandidateSource,
) -> Iterator[IconCandidate]:
    for extensions in _extension_groups(query.prefer_3d):
        found = lookup.find(query.icon_name, size, theme, greedy=True, extensions=extensions)
        if found is not None:
            yield IconCandidate(found, source, size)


def theme_candidates(lookup: ThemeLookupPort, theme_of: ThemeProvider) -> CandidateStrategy:
    """Query the current icon theme at the preferred size."""

    def _strategy(query: IconQuery) -> Iterator[IconCandidate]:
        yield from _theme_hits(lookup, query, query.preferred_size, theme_of(), CandidateSource.THEME)

    return _strategy


def theme_fallback_candidates(
    lookup: ThemeLookupPort,
    theme_of: ThemeProvider,
    sizes: Sequence[int],
) -> CandidateStrategy:
    """Query the current icon theme down a ladder of standard sizes."""

    def _strategy(query: IconQuery) -> Iterator[IconCandidate]:
        theme = theme_of()
        for size in sizes:
            yield from _theme_hits(lookup, query, size, theme, CandidateSource.THEME_FALLBACK)

    return _strategy


__all__ = [
    "CandidateStrategy",
    "ThemeProvider",
    "cache_candidates",
    "exact_path_candidates",
    "theme_candidates",
    "theme_fallback_candidates",
]
