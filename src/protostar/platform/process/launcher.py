"""Start desktop applications as detached child processes."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Mapping
from typing import Final

from protostar.platform.logging import logger

SHELL: Final[str] = "/bin/sh"

# Desktop Entry Specification field codes; the launcher passes no files/URLs.
_FIELD_CODES: Final[re.Pattern[str]] = re.compile(r"%%|%[fFuUdDnNickvm]")


def strip_field_codes(command: str) -> str:
    """Remove ``%f``-style field codes, keeping ``%%`` as a literal percent."""

    return _FIELD_CODES.sub(lambda match: "%" if match.group(0) == "%%" else "", command).strip()


def spawn_detached(command: str, extra_env: Mapping[str, str] | None = None) -> subprocess.Popen[bytes]:
    """Run ``command`` through ``/bin/sh -c`` in its own session.

    Standard streams go to ``/dev/null`` so the child outlives the launcher
    without holding its terminal.

    Raises:
        OSError: If the shell cannot be started.
    """
    env = dict(os.environ)
    if extra_env:
        env.update(extra_env)

    logger.info("Launching \"%s\"", command)
    return subprocess.Popen(
        [SHELL, "-c", command],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        env=env,
        start_new_session=True,
    )


__all__ = ["SHELL", "spawn_detached", "strip_field_codes"]
