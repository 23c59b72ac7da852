"""Where: src/protostar/ui/cli/commands/icon.py
What: Resolve and describe one application's icon.
Why: Debug why an application shows the default visual.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from protostar.config.config import Config
from protostar.ui.cli.args.options import IconArgs
from protostar.ui.cli.commands.base import ServiceCommand, ServiceFactory
from protostar.ui.cli.display import build_icon_table


@final
class IconCommand(ServiceCommand):
    """Resolve a single icon and print the result."""

    def __init__(
        self,
        args: IconArgs,
        *,
        config: Config | None = None,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(config=config, service_factory=service_factory, console=console)
        self._args = args

    def execute(self) -> int:
        service = self.service()
        app = service.find(self._args.query)
        if app is None:
            self._console.print(f"[red]No application matches '{self._args.query}'.[/red]")
            return 1

        icon = service.icon_for(app, self._args.size, self._args.prefer_3d or None)
        self._console.print(build_icon_table(app, icon))
        return 0 if icon is not None else 1
