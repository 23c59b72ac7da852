"""Command line argument handling package."""

from protostar.ui.cli.args.parser import ArgumentParser
from protostar.ui.cli.args.options import AppsArgs, CLIArgs, IconArgs, LaunchArgs

__all__ = ["AppsArgs", "ArgumentParser", "CLIArgs", "IconArgs", "LaunchArgs"]
