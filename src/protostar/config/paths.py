"""Shared path utilities for configuration, cache and data locations.

This module centralizes how the launcher discovers the XDG locations it
reads from and writes to.

Policy (XDG base directories):
- Config: ``${XDG_CONFIG_HOME:-~/.config}/protostar/config.toml`` unless
  overridden by ``PROTOSTAR_CONFIG_PATH``.
- Icon cache: ``${XDG_CACHE_HOME:-~/.cache}/protostar_icon_cache`` unless
  overridden by ``PROTOSTAR_CACHE_DIR``.
- Logs: ``${XDG_STATE_HOME:-~/.local/state}/protostar/protostar.log``.
- Data dirs: ``XDG_DATA_DIRS`` followed by ``~/.local/share``,
  ``/usr/share`` and ``/usr/local/share``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

from protostar.config.settings import CACHE_DIR_NAME, CACHE_FILE_NAME

_ENV_CONFIG_PATH: Final[str] = "PROTOSTAR_CONFIG_PATH"
_ENV_CACHE_DIR: Final[str] = "PROTOSTAR_CACHE_DIR"

_SYSTEM_DATA_DIRS: Final[tuple[str, ...]] = ("/usr/share", "/usr/local/share")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_home(env_var: str, fallback: str, env: Mapping[str, str] | None = None) -> Path:
    """Return an XDG base directory, falling back below ``$HOME``.

    Relative values are ignored as the XDG base directory rules require.
    """
    mapping = env if env is not None else os.environ
    value = (mapping.get(env_var) or "").strip()
    if value and Path(value).is_absolute():
        return Path(value)
    return Path.home() / fallback


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _xdg_home("XDG_CONFIG_HOME", ".config", env)
        / "protostar"
        / "config.toml",
    )


def default_cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding the image cache snapshot and raster artifacts.

    The directory is not created here; writers create it on demand.
    """

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CACHE_DIR,
        default_factory=lambda: _xdg_home("XDG_CACHE_HOME", ".cache", env) / CACHE_DIR_NAME,
    )


def default_cache_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the persistent image cache snapshot path."""

    return default_cache_dir(env) / CACHE_FILE_NAME


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return (_xdg_home("XDG_STATE_HOME", ".local/state", env) / "protostar").resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "protostar.log").resolve()


def data_dirs(env: Mapping[str, str] | None = None, home: Path | None = None) -> list[Path]:
    """Return existing XDG data directories in search order, deduplicated.

    Args:
        env: Optional environment mapping; defaults to ``os.environ``.
        home: Optional home directory; defaults to ``Path.home()``.

    Returns:
        list[Path]: ``XDG_DATA_DIRS`` entries, then ``~/.local/share``,
        ``/usr/share`` and ``/usr/local/share``, keeping only directories
        that exist. The first occurrence of a duplicate wins.
    """
    mapping = env if env is not None else os.environ
    home_dir = home if home is not None else Path.home()

    candidates: list[Path] = [
        Path(part) for part in (mapping.get("XDG_DATA_DIRS") or "").split(":") if part
    ]
    candidates.append(home_dir / ".local" / "share")
    candidates.extend(Path(p) for p in _SYSTEM_DATA_DIRS)

    seen: set[Path] = set()
    result: list[Path] = []
    for candidate in candidates:
        if candidate in seen or not candidate.is_dir():
            continue
        seen.add(candidate)
        result.append(candidate)
    return result


__all__ = [
    "data_dirs",
    "default_cache_dir",
    "default_cache_file",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
