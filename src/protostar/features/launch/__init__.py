"""Launchable applications."""

from .application import (
    STARTUP_TOKEN_ENV,
    Application,
    HiddenApplicationError,
    LaunchError,
    MissingCommandError,
)

__all__ = [
    "Application",
    "HiddenApplicationError",
    "LaunchError",
    "MissingCommandError",
    "STARTUP_TOKEN_ENV",
]
