"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class AppsArgs:
    """Command line arguments for the ``apps`` subcommand."""

    command: Literal["apps"]
    size: int | None
    show_all: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class IconArgs:
    """Command line arguments for the ``icon`` subcommand."""

    command: Literal["icon"]
    query: str
    size: int | None
    prefer_3d: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class LaunchArgs:
    """Command line arguments for the ``launch`` subcommand."""

    command: Literal["launch"]
    query: str
    verbose: bool
    quiet: bool


CLIArgs = AppsArgs | IconArgs | LaunchArgs

__all__ = ["AppsArgs", "CLIArgs", "IconArgs", "LaunchArgs"]
