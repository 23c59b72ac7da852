"""Detect the icon theme the desktop session is configured to use."""

from __future__ import annotations

import configparser
import os
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

from protostar.platform.logging import logger

_GSETTINGS_TIMEOUT_SECONDS = 2


def _config_home(env: Mapping[str, str]) -> Path:
    value = (env.get("XDG_CONFIG_HOME") or "").strip()
    if value and Path(value).is_absolute():
        return Path(value)
    return Path.home() / ".config"


def _read_ini_value(path: Path, section: str, key: str) -> str | None:
    if not path.is_file():
        return None
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        _ = parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as exc:
        logger.debug("Could not parse %s: %s", path, exc)
        return None
    value = parser.get(section, key, fallback="").strip().strip('"')
    return value or None


def _gsettings_theme() -> str | None:
    executable = shutil.which("gsettings")
    if executable is None:
        return None
    try:
        completed = subprocess.run(
            [executable, "get", "org.gnome.desktop.interface", "icon-theme"],
            capture_output=True,
            text=True,
            timeout=_GSETTINGS_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("gsettings query failed: %s", exc)
        return None
    if completed.returncode != 0:
        return None
    value = completed.stdout.strip().strip("'\"")
    return value or None


def detect_icon_theme(env: Mapping[str, str] | None = None) -> str | None:
    """Return the session's icon theme name, or None if it cannot be found.

    Sources, first hit wins: GTK 3 ``settings.ini``, KDE ``kdeglobals``,
    then ``gsettings``.
    """
    mapping = env if env is not None else os.environ
    config_home = _config_home(mapping)

    theme = _read_ini_value(config_home / "gtk-3.0" / "settings.ini", "Settings", "gtk-icon-theme-name")
    if theme is None:
        theme = _read_ini_value(config_home / "kdeglobals", "Icons", "Theme")
    if theme is None:
        theme = _gsettings_theme()

    if theme is not None:
        logger.debug("Detected icon theme %s", theme)
    return theme


__all__ = ["detect_icon_theme"]
