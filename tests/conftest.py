"""Shared pytest fixtures isolating XDG locations and configuration state."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from protostar.config.config import Config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point HOME and the XDG base directories at a temporary tree."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.delenv("XDG_DATA_DIRS", raising=False)
    monkeypatch.delenv("PROTOSTAR_CONFIG_PATH", raising=False)
    monkeypatch.delenv("PROTOSTAR_CACHE_DIR", raising=False)

    Config.reset()
    try:
        yield home
    finally:
        Config.reset()
