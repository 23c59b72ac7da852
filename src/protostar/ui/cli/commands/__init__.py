"""Command execution package for CLI."""

from protostar.ui.cli.commands.apps import AppsCommand
from protostar.ui.cli.commands.icon import IconCommand
from protostar.ui.cli.commands.launch import LaunchCommand

__all__ = ["AppsCommand", "IconCommand", "LaunchCommand"]
