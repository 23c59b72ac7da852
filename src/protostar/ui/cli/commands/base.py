"""Shared plumbing for CLI commands."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console

from protostar.application.services.launcher_service import LauncherService
from protostar.config.config import Config

ServiceFactory = Callable[[Config], LauncherService]


class ServiceCommand:
    """Base for commands that work against a ``LauncherService``."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        self._config = config or Config.load()
        self._service_factory = service_factory or LauncherService
        self._console = console or Console()

    def service(self) -> LauncherService:
        return self._service_factory(self._config)


__all__ = ["ServiceCommand", "ServiceFactory"]
