"""Where: src/protostar/ui/cli/commands/launch.py
What: Launch one application from the command line.
Why: Exercise the same launch path the spatial shell uses.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from protostar.config.config import Config
from protostar.features.launch import LaunchError
from protostar.ui.cli.args.options import LaunchArgs
from protostar.ui.cli.commands.base import ServiceCommand, ServiceFactory


@final
class LaunchCommand(ServiceCommand):
    """Start the matching application detached from the terminal."""

    def __init__(
        self,
        args: LaunchArgs,
        *,
        config: Config | None = None,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(config=config, service_factory=service_factory, console=console)
        self._args = args

    def execute(self) -> int:
        app = self.service().find(self._args.query)
        if app is None:
            self._console.print(f"[red]No application matches '{self._args.query}'.[/red]")
            return 1

        try:
            process = app.launch()
        except LaunchError as exc:
            self._console.print(f"[red]{exc}[/red]")
            return 1

        if not self._args.quiet:
            self._console.print(
                f"[green]Launched {app.name or app.desktop_id}[/green] [dim](pid {process.pid})[/dim]"
            )
        return 0
