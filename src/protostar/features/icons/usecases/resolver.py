"""Where: src/protostar/features/icons/usecases/resolver.py
What: Resolve a desktop entry's icon name to a displayable asset.
Why: Combine exact paths, the persistent cache and the icon theme into one
    deterministic fallback chain.
Assumptions: - Resolution is synchronous; callers offload it if they must not block.
Trade-offs: - The cache stores source paths, so vector hits still pass through
    the rasterizer's own content-addressed cache.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import final

from protostar.config.settings import DEFAULT_ICON_THEME, ICON_SIZES
from protostar.features.entries.domain.models import DesktopEntryRecord
from protostar.features.icons.domain.errors import RasterizationError, UnrecognizedExtensionError
from protostar.features.icons.domain.models import (
    CandidateSource,
    IconCandidate,
    IconKind,
    IconQuery,
    IconRecord,
)
from protostar.features.icons.usecases.ports import ImageCachePort, RasterizerPort, ThemeLookupPort
from protostar.features.icons.usecases.strategies import (
    CandidateStrategy,
    cache_candidates,
    exact_path_candidates,
    theme_candidates,
    theme_fallback_candidates,
)
from protostar.platform.logging import logger
from protostar.platform.theme import detect_icon_theme


@final
class IconResolver:
    """Resolve icons through exact path, cache, theme and size-ladder lookups."""

    def __init__(
        self,
        cache: ImageCachePort,
        theme_lookup: ThemeLookupPort,
        rasterizer: RasterizerPort,
        *,
        theme: str | None = None,
        theme_detector: Callable[[], str | None] = detect_icon_theme,
        sizes: Sequence[int] = ICON_SIZES,
    ) -> None:
        """Initialize the resolver.

        Args:
            cache: Persistent cache shared by every resolution.
            theme_lookup: Icon-theme index adapter.
            rasterizer: Vector to raster converter.
            theme: Fixed theme name; when None the session theme is detected
                on first use.
            theme_detector: Callable returning the session theme or None.
            sizes: Fallback sizes tried after the preferred size.
        """
        self._cache = cache
        self._theme_lookup = theme_lookup
        self._rasterizer = rasterizer
        self._theme = theme
        self._theme_detector = theme_detector
        self._strategies: tuple[CandidateStrategy, ...] = (
            exact_path_candidates,
            cache_candidates(cache),
            theme_candidates(theme_lookup, self.current_theme),
            theme_fallback_candidates(theme_lookup, self.current_theme, tuple(sizes)),
        )

    def current_theme(self) -> str:
        """Return the theme used for lookups, detecting it once if needed."""

        if self._theme is None:
            self._theme = self._theme_detector() or DEFAULT_ICON_THEME
            logger.debug("Using icon theme %s", self._theme)
        return self._theme

    def candidates(self, query: IconQuery) -> Iterator[IconCandidate]:
        """Lazily chain every strategy's candidates in priority order."""

        for strategy in self._strategies:
            yield from strategy(query)

    def resolve(
        self,
        entry: DesktopEntryRecord,
        preferred_size: int,
        *,
        prefer_3d: bool = False,
    ) -> IconRecord | None:
        """Return the first usable icon for ``entry``, or None.

        None is the normal "no icon available" outcome; callers show a
        default visual.
        """
        if entry.icon_name is None:
            logger.debug("No icon configured for %s", entry.path)
            return None

        query = IconQuery(
            icon_name=entry.icon_name,
            entry_dir=entry.directory,
            preferred_size=preferred_size,
            prefer_3d=prefer_3d,
        )
        for candidate in self.candidates(query):
            record = self._accept(query, candidate)
            if record is not None:
                return record

        logger.debug(
            "No icon found",
            extra={"icon_event": "icon.missing", "icon_name": query.icon_name, "icon_size": preferred_size},
        )
        return None

    def _accept(self, query: IconQuery, candidate: IconCandidate) -> IconRecord | None:
        try:
            record = IconRecord.from_path(candidate.path, query.preferred_size)
        except UnrecognizedExtensionError as exc:
            logger.debug("Skipping %s candidate: %s", candidate.source.value, exc)
            return None

        if candidate.source is not CandidateSource.CACHE:
            _ = self._cache.insert_and_persist(query.icon_name, query.preferred_size, candidate.path)

        try:
            processed = self._post_process(record)
        except RasterizationError as exc:
            logger.warning("Unusable icon for %s: %s", query.icon_name, exc)
            return None

        logger.debug(
            "Resolved icon",
            extra={
                "icon_event": "icon.resolved",
                "icon_name": query.icon_name,
                "icon_size": query.preferred_size,
                "icon_source": candidate.source.value,
                "icon_path": str(processed.path),
            },
        )
        return processed

    def _post_process(self, record: IconRecord) -> IconRecord:
        if record.kind is not IconKind.VECTOR:
            return record
        raster = self._rasterizer.vector_to_raster(record.path, record.size)
        return IconRecord(kind=IconKind.RASTER, path=raster, size=record.size)


__all__ = ["IconResolver"]
