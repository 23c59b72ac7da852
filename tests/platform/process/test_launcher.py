"""Tests for detached process launch helpers."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from protostar.platform.process import SHELL, spawn_detached, strip_field_codes


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        ("firefox %u", "firefox"),
        ("gimp-2.10 %U", "gimp-2.10"),
        ("code --new-window %F", "code --new-window"),
        ("app --icon %i --name %c", "app --icon  --name"),
        ("printf 100%%", "printf 100%"),
        ("plain", "plain"),
    ],
)
def test_strip_field_codes(command: str, expected: str) -> None:
    assert strip_field_codes(command) == expected


def test_spawn_detached_runs_shell_in_new_session(mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXISTING_VAR", "kept")
    popen: MagicMock = mocker.patch("protostar.platform.process.launcher.subprocess.Popen")

    _ = spawn_detached("firefox", {"STARDUST_STARTUP_TOKEN": "abc"})

    popen.assert_called_once()
    args, kwargs = popen.call_args
    assert args[0] == [SHELL, "-c", "firefox"]
    assert kwargs["start_new_session"] is True
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert kwargs["stdout"] is subprocess.DEVNULL
    assert kwargs["stderr"] is subprocess.DEVNULL
    assert kwargs["env"]["STARDUST_STARTUP_TOKEN"] == "abc"
    assert kwargs["env"]["EXISTING_VAR"] == "kept"
