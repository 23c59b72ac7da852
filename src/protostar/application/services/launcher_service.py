"""Where: src/protostar/application/services/launcher_service.py
What: Wire the icon cache, theme adapter, rasterizer and resolver once.
Why: Callers share one cache object instead of hidden process-wide state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from protostar.config.config import Config
from protostar.config.paths import default_cache_dir
from protostar.config.settings import CACHE_FILE_NAME
from protostar.features.entries import DesktopEntryRecord, load_desktop_entries
from protostar.features.icons import IconRecord, IconResolver
from protostar.features.launch import Application
from protostar.platform.cache import ImageCache
from protostar.platform.logging import logger
from protostar.platform.raster import Rasterizer
from protostar.platform.theme import ThemeLookup


@dataclass(frozen=True, slots=True)
class ApplicationView:
    """An application paired with its resolved icon, for listings."""

    application: Application
    icon: IconRecord | None


def build_icon_resolver(config: Config, cache_dir: Path | None = None) -> IconResolver:
    """Construct the resolver and its collaborators from configuration."""

    directory = cache_dir or default_cache_dir()
    cache = ImageCache.load(directory / CACHE_FILE_NAME)
    return IconResolver(
        cache,
        ThemeLookup(),
        Rasterizer(directory),
        theme=config.icon_theme,
    )


@final
class LauncherService:
    """Application catalogue with icon resolution and launch."""

    def __init__(
        self,
        config: Config,
        *,
        resolver: IconResolver | None = None,
        entry_loader: Callable[[], list[DesktopEntryRecord]] = load_desktop_entries,
    ) -> None:
        self._config = config
        self._resolver = resolver or build_icon_resolver(config)
        self._entry_loader = entry_loader
        self._entries: list[DesktopEntryRecord] | None = None

    @property
    def resolver(self) -> IconResolver:
        return self._resolver

    def entries(self) -> list[DesktopEntryRecord]:
        """Return desktop entries, scanning the data directories once."""

        if self._entries is None:
            self._entries = self._entry_loader()
        return self._entries

    def applications(self, *, include_hidden: bool | None = None) -> list[Application]:
        """Return applications sorted by display name.

        Hidden entries are included only when asked for, or when the
        configuration enables ``show_hidden``.
        """
        show_hidden = self._config.show_hidden if include_hidden is None else include_hidden
        apps: list[Application] = []
        for entry in self.entries():
            if not entry.hidden:
                apps.append(Application.create(entry))
            elif show_hidden:
                apps.append(Application(entry))
        apps.sort(key=lambda app: ((app.name or app.desktop_id).casefold(), app.desktop_id))
        return apps

    def find(self, query: str, *, include_hidden: bool | None = None) -> Application | None:
        """Find an application by desktop id, then by case-insensitive name.

        Hidden entries match only under the same rule as ``applications``.
        """
        needle = query.strip()
        if not needle:
            return None
        candidates = self.applications(include_hidden=include_hidden)
        for app in candidates:
            if app.desktop_id == needle or app.desktop_id.casefold() == needle.casefold():
                return app
        for app in candidates:
            if app.name is not None and app.name.casefold() == needle.casefold():
                return app
        logger.debug("No application matches %r", query)
        return None

    def icon_for(
        self,
        app: Application,
        size: int | None = None,
        prefer_3d: bool | None = None,
    ) -> IconRecord | None:
        """Resolve ``app``'s icon using configured defaults for unset options."""

        return app.icon(
            self._resolver,
            size or self._config.icon_size,
            self._config.prefer_3d if prefer_3d is None else prefer_3d,
        )

    def catalogue(self, *, size: int | None = None, include_hidden: bool | None = None) -> list[ApplicationView]:
        """Return every listed application with its icon."""

        return [
            ApplicationView(app, self.icon_for(app, size))
            for app in self.applications(include_hidden=include_hidden)
        ]


__all__ = ["ApplicationView", "LauncherService", "build_icon_resolver"]
