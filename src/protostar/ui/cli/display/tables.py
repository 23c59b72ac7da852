"""Where: src/protostar/ui/cli/display/tables.py
What: Rich renderables for application listings and icon results.
Why: Keep formatting rules out of the command classes.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from protostar.application.services.launcher_service import ApplicationView
from protostar.features.icons import IconKind, IconRecord
from protostar.features.launch import Application
from protostar.platform.logging import shorten_path

_KIND_STYLES: dict[IconKind, str] = {
    IconKind.RASTER: "green",
    IconKind.VECTOR: "cyan",
    IconKind.MODEL_3D: "magenta",
}


def format_icon_kind(icon: IconRecord | None) -> Text:
    if icon is None:
        return Text("default", style="dim")
    return Text(icon.kind.value, style=_KIND_STYLES[icon.kind])


def format_icon_path(icon: IconRecord | None) -> Text:
    if icon is None:
        return Text("N/A", style="dim")
    return Text(shorten_path(icon.path))


def build_catalogue_table(views: Sequence[ApplicationView]) -> Table:
    """Tabulate applications with their categories and icons."""

    table = Table(
        title="Applications",
        show_header=True,
        header_style="bold magenta",
        box=box.SIMPLE_HEAD,
        highlight=True,
    )
    table.add_column("Name", style="bold")
    table.add_column("Desktop ID", style="dim")
    table.add_column("Categories")
    table.add_column("Icon")
    table.add_column("Path")

    for view in views:
        app = view.application
        name = Text(app.name or app.desktop_id)
        if app.entry.hidden:
            name.stylize("dim italic")
        table.add_row(
            name,
            app.desktop_id,
            ", ".join(app.categories),
            format_icon_kind(view.icon),
            format_icon_path(view.icon),
        )
    return table


def build_icon_table(app: Application, icon: IconRecord | None) -> Table:
    """Describe one application's resolved icon."""

    table = Table(show_header=False, box=box.SIMPLE)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Application", app.name or app.desktop_id)
    table.add_row("Icon name", app.entry.icon_name or Text("N/A", style="dim"))
    table.add_row("Kind", format_icon_kind(icon))
    table.add_row("Size", str(icon.size) if icon is not None else Text("N/A", style="dim"))
    table.add_row("Path", str(icon.path) if icon is not None else Text("N/A", style="dim"))
    return table


__all__ = ["build_catalogue_table", "build_icon_table", "format_icon_kind", "format_icon_path"]
