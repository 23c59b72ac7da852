"""
Summary: Exercise the apps, icon and launch commands against a mocked service.
Why: Commands translate service results into output and exit codes.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from protostar.application.services.launcher_service import ApplicationView, LauncherService
from protostar.config.config import Config
from protostar.features.entries import DesktopEntryRecord
from protostar.features.icons import IconKind, IconRecord
from protostar.features.launch import Application, LaunchError
from protostar.ui.cli.args.options import AppsArgs, IconArgs, LaunchArgs
from protostar.ui.cli.commands import AppsCommand, IconCommand, LaunchCommand

FIREFOX = Application(
    DesktopEntryRecord(
        path=Path("/usr/share/applications/firefox.desktop"),
        name="Firefox",
        command="firefox %u",
        categories=("Network",),
        icon_name="firefox",
    )
)
ICON = IconRecord(kind=IconKind.RASTER, path=Path("/usr/share/icons/hicolor/64x64/apps/firefox.png"), size=64)


@pytest.fixture
def service(mocker: MockerFixture) -> MagicMock:
    return mocker.create_autospec(LauncherService, instance=True)


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=200, color_system=None)


def _factory(service: MagicMock):
    return lambda _config: service


def test_apps_lists_catalogue(service: MagicMock, console: Console) -> None:
    service.catalogue.return_value = [ApplicationView(FIREFOX, ICON)]
    args = AppsArgs(command="apps", size=64, show_all=True, verbose=False, quiet=False)

    code = AppsCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 0
    service.catalogue.assert_called_once_with(size=64, include_hidden=True)
    output = console.export_text()
    assert "Firefox" in output
    assert "raster" in output


def test_apps_defaults_hidden_to_config(service: MagicMock, console: Console) -> None:
    service.catalogue.return_value = []
    args = AppsArgs(command="apps", size=None, show_all=False, verbose=False, quiet=False)

    code = AppsCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 0
    service.catalogue.assert_called_once_with(size=None, include_hidden=None)
    assert "No applications found" in console.export_text()


def test_icon_reports_resolution(service: MagicMock, console: Console) -> None:
    service.find.return_value = FIREFOX
    service.icon_for.return_value = ICON
    args = IconArgs(command="icon", query="firefox", size=64, prefer_3d=False, verbose=False, quiet=False)

    code = IconCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 0
    service.icon_for.assert_called_once_with(FIREFOX, 64, None)
    assert "firefox.png" in console.export_text()


def test_icon_missing_returns_failure(service: MagicMock, console: Console) -> None:
    service.find.return_value = FIREFOX
    service.icon_for.return_value = None
    args = IconArgs(command="icon", query="firefox", size=None, prefer_3d=True, verbose=False, quiet=False)

    code = IconCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 1
    service.icon_for.assert_called_once_with(FIREFOX, None, True)
    assert "default" in console.export_text()


def test_icon_unknown_application(service: MagicMock, console: Console) -> None:
    service.find.return_value = None
    args = IconArgs(command="icon", query="nope", size=None, prefer_3d=False, verbose=False, quiet=False)

    code = IconCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 1
    assert "No application matches 'nope'" in console.export_text()


def test_launch_starts_application(mocker: MockerFixture, service: MagicMock, console: Console) -> None:
    app = mocker.Mock(desktop_id="firefox")
    app.name = "Firefox"
    app.launch.return_value = mocker.Mock(pid=4321)
    service.find.return_value = app
    args = LaunchArgs(command="launch", query="firefox", verbose=False, quiet=False)

    code = LaunchCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 0
    app.launch.assert_called_once_with()
    output = console.export_text()
    assert "Launched Firefox" in output
    assert "(pid 4321)" in output


def test_launch_failure(mocker: MockerFixture, service: MagicMock, console: Console) -> None:
    app = mocker.Mock(desktop_id="firefox")
    app.launch.side_effect = LaunchError("Failed to start firefox: boom")
    service.find.return_value = app
    args = LaunchArgs(command="launch", query="firefox", verbose=False, quiet=True)

    code = LaunchCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 1
    assert "boom" in console.export_text()


def test_launch_unknown_application(service: MagicMock, console: Console) -> None:
    service.find.return_value = None
    args = LaunchArgs(command="launch", query="ghost", verbose=False, quiet=False)

    code = LaunchCommand(args, config=Config(), service_factory=_factory(service), console=console).execute()

    assert code == 1
