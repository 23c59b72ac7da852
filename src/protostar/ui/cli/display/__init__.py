"""Display helpers for the CLI."""

from protostar.ui.cli.display.tables import build_catalogue_table, build_icon_table

__all__ = ["build_catalogue_table", "build_icon_table"]
