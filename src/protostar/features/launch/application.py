"""Where: src/protostar/features/launch/application.py
What: Launchable application wrapper around a desktop entry record.
Why: Give the spatial shell one object to ask for a name, an icon and a launch.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import final

from protostar.features.entries.domain.models import DesktopEntryRecord
from protostar.features.icons.domain.models import IconRecord
from protostar.features.icons.usecases.resolver import IconResolver
from protostar.platform.process import spawn_detached, strip_field_codes

Spawner = Callable[[str, Mapping[str, str] | None], subprocess.Popen[bytes]]

STARTUP_TOKEN_ENV = "STARDUST_STARTUP_TOKEN"


class LaunchError(Exception):
    """Base exception for application launch failures."""


class HiddenApplicationError(LaunchError):
    """Raised when an entry is marked NoDisplay or Hidden."""


class MissingCommandError(LaunchError):
    """Raised when an entry has no Exec command."""


@final
@dataclass(frozen=True, slots=True)
class Application:
    """A visible desktop application."""

    entry: DesktopEntryRecord

    @classmethod
    def create(cls, entry: DesktopEntryRecord) -> "Application":
        """Wrap ``entry``.

        Raises:
            HiddenApplicationError: If the entry should not be shown.
        """
        if entry.hidden:
            raise HiddenApplicationError(f"Application is hidden: {entry.path}")
        return cls(entry)

    @property
    def name(self) -> str | None:
        return self.entry.name

    @property
    def categories(self) -> tuple[str, ...]:
        return self.entry.categories

    @property
    def desktop_id(self) -> str:
        return self.entry.desktop_id

    def icon(self, resolver: IconResolver, preferred_size: int, prefer_3d: bool = False) -> IconRecord | None:
        """Resolve this application's icon at ``preferred_size``."""

        return resolver.resolve(self.entry, preferred_size, prefer_3d=prefer_3d)

    def command_line(self) -> str:
        """Return the Exec command with field codes removed.

        Raises:
            MissingCommandError: If the entry has no usable command.
        """
        if self.entry.command is None:
            raise MissingCommandError(f"No Exec command in {self.entry.path}")
        command = strip_field_codes(self.entry.command)
        if not command:
            raise MissingCommandError(f"Exec command is empty after field codes in {self.entry.path}")
        return command

    def launch(
        self,
        extra_env: Mapping[str, str] | None = None,
        *,
        startup_token: str | None = None,
        spawner: Spawner = spawn_detached,
    ) -> subprocess.Popen[bytes]:
        """Start the application out of process.

        Args:
            extra_env: Variables added to the child's environment.
            startup_token: Placement token exported as ``STARDUST_STARTUP_TOKEN``.
            spawner: Process starter, replaceable in tests.

        Raises:
            MissingCommandError: If the entry has no command.
            LaunchError: If the shell cannot be started.
        """
        command = self.command_line()
        env = dict(extra_env or {})
        if startup_token is not None:
            env[STARTUP_TOKEN_ENV] = startup_token
        try:
            return spawner(command, env or None)
        except OSError as exc:
            raise LaunchError(f"Failed to start {self.desktop_id}: {exc}") from exc


__all__ = [
    "Application",
    "HiddenApplicationError",
    "LaunchError",
    "MissingCommandError",
    "STARTUP_TOKEN_ENV",
    "Spawner",
]
