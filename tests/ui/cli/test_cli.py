"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from protostar.ui.cli import CommandProcessor
from protostar.ui.cli.args.options import AppsArgs, IconArgs, LaunchArgs


@pytest.fixture
def commands(mocker: MockerFixture) -> dict[str, MagicMock]:
    """Replace the command classes with mocks returning exit code 0."""

    mocks = {
        name: mocker.patch(f"protostar.ui.cli.cli.{name}")
        for name in ("AppsCommand", "IconCommand", "LaunchCommand")
    }
    for mock in mocks.values():
        mock.return_value.execute.return_value = 0
    return mocks


def test_dispatch_apps(commands: dict[str, MagicMock]) -> None:
    assert CommandProcessor.process_command(["apps"]) == 0

    args = commands["AppsCommand"].call_args.args[0]
    assert isinstance(args, AppsArgs)
    commands["IconCommand"].assert_not_called()


def test_dispatch_icon(commands: dict[str, MagicMock]) -> None:
    commands["IconCommand"].return_value.execute.return_value = 1

    assert CommandProcessor.process_command(["icon", "firefox"]) == 1
    assert isinstance(commands["IconCommand"].call_args.args[0], IconArgs)


def test_dispatch_launch(commands: dict[str, MagicMock]) -> None:
    assert CommandProcessor.process_command(["launch", "firefox"]) == 0
    assert isinstance(commands["LaunchCommand"].call_args.args[0], LaunchArgs)


def test_keyboard_interrupt(commands: dict[str, MagicMock]) -> None:
    commands["AppsCommand"].return_value.execute.side_effect = KeyboardInterrupt

    assert CommandProcessor.process_command(["apps"]) == 130


def test_unexpected_error(commands: dict[str, MagicMock]) -> None:
    commands["LaunchCommand"].return_value.execute.side_effect = RuntimeError("boom")

    assert CommandProcessor.process_command(["launch", "x"]) == 1


def test_invalid_config(isolated_home: Path, commands: dict[str, MagicMock]) -> None:
    config_file = isolated_home / ".config" / "protostar" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text("icon_size = [unterminated\n", encoding="utf-8")

    assert CommandProcessor.process_command(["apps"]) == 1
    commands["AppsCommand"].assert_not_called()


def test_usage_error_exits() -> None:
    with pytest.raises(SystemExit):
        _ = CommandProcessor.process_command(["bogus"])
