"""Where: src/protostar/ui/cli/commands/apps.py
What: List installed applications and their icons.
Why: Show at a glance which entries resolve to which assets.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from protostar.config.config import Config
from protostar.ui.cli.args.options import AppsArgs
from protostar.ui.cli.commands.base import ServiceCommand, ServiceFactory
from protostar.ui.cli.display import build_catalogue_table


@final
class AppsCommand(ServiceCommand):
    """Render the application catalogue in a Rich table."""

    def __init__(
        self,
        args: AppsArgs,
        *,
        config: Config | None = None,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(config=config, service_factory=service_factory, console=console)
        self._args = args

    def execute(self) -> int:
        """Print the catalogue; returns the process exit code."""

        views = self.service().catalogue(
            size=self._args.size,
            include_hidden=True if self._args.show_all else None,
        )
        if not views:
            self._console.print("[yellow]No applications found.[/yellow]")
            return 0

        self._console.print(build_catalogue_table(views))
        return 0
