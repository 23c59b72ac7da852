"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import IconPathRichHandler, shorten_path

__all__ = [
    "DEFAULT_LOG_FILE",
    "IconPathRichHandler",
    "logger",
    "setup_logger",
    "shorten_path",
]
