"""
Summary: Error taxonomy for icon resolution and rasterization.
Why: Let each fallback step report a precise failure the resolver can skip.
"""

from __future__ import annotations

from pathlib import Path


class IconError(Exception):
    """Base exception for icon pipeline failures."""


class UnrecognizedExtensionError(IconError):
    """Raised when a candidate file is not a PNG, SVG, GLB or glTF asset."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Unrecognized icon extension: {path}")
        self.path = path


class RasterizationError(IconError):
    """Base exception for vector to raster conversion failures."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"{reason}: {source}")
        self.source = source
        self.reason = reason


class SourceUnreadableError(RasterizationError):
    """Raised when the vector source cannot be stat'ed or read."""


class MalformedDocumentError(RasterizationError):
    """Raised when the vector source does not parse as an SVG document."""


class WriteFailedError(RasterizationError):
    """Raised when the rendered bitmap cannot be written to the cache."""


class RendererUnavailableError(RasterizationError):
    """Raised when the SVG renderer or its native cairo library cannot be loaded."""


__all__ = [
    "IconError",
    "MalformedDocumentError",
    "RasterizationError",
    "RendererUnavailableError",
    "SourceUnreadableError",
    "UnrecognizedExtensionError",
    "WriteFailedError",
]
