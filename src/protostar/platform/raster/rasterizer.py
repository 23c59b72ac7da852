"""Where: src/protostar/platform/raster/rasterizer.py
What: Convert SVG icons to square PNG files, cached by content address.
Why: The scene can only texture bitmaps, and rendering is too slow to repeat.
Assumptions: - A file at the content address is a finished artifact.
Trade-offs: - Concurrent misses for one address may both render; the second
    write replaces an identical file.
"""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path
from typing import final

from PIL import Image, UnidentifiedImageError

from protostar.config.paths import default_cache_dir
from protostar.features.icons.domain.errors import (
    MalformedDocumentError,
    RendererUnavailableError,
    SourceUnreadableError,
    WriteFailedError,
)
from protostar.platform.logging import logger

Renderer = Callable[[bytes, int, Path, Path], None]


def artifact_name(source: Path, byte_length: int, size: int) -> str:
    """Return the content-addressed file name for a rendered icon."""

    return f"{source.name}-{byte_length}-{size}.png"


def render_svg(data: bytes, size: int, source: Path, target: Path) -> None:
    """Render SVG ``data`` into a ``size`` x ``size`` PNG at ``target``.

    The drawing is scaled to fit the width and anchored at the top-left
    corner; anything taller than the square is clipped.

    Raises:
        RendererUnavailableError: If cairosvg or libcairo cannot be loaded.
        MalformedDocumentError: If cairosvg cannot parse or draw the document.
        WriteFailedError: If the bitmap cannot be written.
    """
    try:
        import cairosvg
    except (ImportError, OSError) as exc:  # cairocffi raises OSError when libcairo is missing
        raise RendererUnavailableError(source, f"SVG renderer unavailable ({exc})") from exc

    try:
        png = cairosvg.svg2png(bytestring=data, output_width=size)
    except Exception as exc:  # cairosvg surfaces parse errors as many unrelated types
        raise MalformedDocumentError(source, f"Cannot render SVG ({exc})") from exc
    if not png:
        raise MalformedDocumentError(source, "SVG rendered to an empty image")

    try:
        with Image.open(BytesIO(png)) as rendered:
            canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
            canvas.paste(rendered.convert("RGBA"), (0, 0))
    except UnidentifiedImageError as exc:
        raise MalformedDocumentError(source, "SVG rendered to an unreadable image") from exc

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        canvas.save(target, format="PNG")
    except (OSError, ValueError) as exc:
        raise WriteFailedError(source, f"Cannot write {target} ({exc})") from exc


@final
class Rasterizer:
    """Vector to raster conversion with an idempotent on-disk cache."""

    cache_dir: Path
    _render: Renderer

    def __init__(self, cache_dir: Path | None = None, renderer: Renderer | None = None) -> None:
        self.cache_dir = cache_dir or default_cache_dir()
        self._render = renderer or render_svg

    def artifact_path(self, source: Path, byte_length: int, size: int) -> Path:
        return self.cache_dir / artifact_name(source, byte_length, size)

    def vector_to_raster(self, source_path: Path, target_size: int) -> Path:
        """Return a PNG rendering of ``source_path`` at ``target_size``.

        An existing artifact is returned without reading the source.

        Raises:
            SourceUnreadableError: The source is missing or unreadable.
            MalformedDocumentError: The source is not a usable SVG.
            WriteFailedError: The PNG could not be written.
        """
        try:
            source = Path(source_path).resolve(strict=True)
            byte_length = source.stat().st_size
        except OSError as exc:
            raise SourceUnreadableError(Path(source_path), f"Cannot stat source ({exc})") from exc

        target = self.artifact_path(source, byte_length, target_size)
        if target.exists():
            logger.debug(
                "Raster cache hit",
                extra={
                    "icon_event": "raster.hit",
                    "icon_name": source.name,
                    "icon_size": target_size,
                    "icon_path": str(target),
                },
            )
            return target

        try:
            data = source.read_bytes()
        except OSError as exc:
            raise SourceUnreadableError(source, f"Cannot read source ({exc})") from exc

        self._render(data, target_size, source, target)
        logger.debug(
            "Rendered vector icon",
            extra={
                "icon_event": "raster.render",
                "icon_name": source.name,
                "icon_size": target_size,
                "icon_path": str(target),
            },
        )
        return target


__all__ = ["Rasterizer", "Renderer", "artifact_name", "render_svg"]
