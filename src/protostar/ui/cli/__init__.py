"""CLI package exposing the console script entry point."""

from protostar.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
