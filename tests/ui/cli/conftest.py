"""Fixtures shared by CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from protostar.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def cli_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Send the CLI's file log to a temporary path and restore console-only logging."""

    log_file = tmp_path / "logs" / "protostar.log"
    monkeypatch.setattr("protostar.ui.cli.args.parser.DEFAULT_LOG_FILE", log_file)
    try:
        yield log_file
    finally:
        _ = setup_logger()
