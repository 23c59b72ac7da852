"""Rich console handler that renders icon pipeline events compactly.

Where: platform/logging/handlers.py
What: Format records tagged with ``icon_event`` as one short line with a
    shortened asset path.
Why: Theme and cache paths are long; the interesting part is the tail.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

_ELLIPSIS: Final[str] = "…"
_MAX_TAIL_SEGMENTS: Final[int] = 4


def shorten_path(path: str | Path, *, home: Path | None = None, max_segments: int = _MAX_TAIL_SEGMENTS) -> str:
    """Return a display form of ``path``.

    Paths below the home directory start with ``~``; anything deeper than
    ``max_segments`` keeps only its trailing segments behind an ellipsis.
    """
    raw = str(path)
    home_dir = str(home if home is not None else Path.home())

    prefix = ""
    remainder = raw
    if home_dir and raw.startswith(home_dir.rstrip("/") + "/"):
        prefix = "~/"
        remainder = raw[len(home_dir.rstrip("/")) + 1 :]

    segments = [segment for segment in remainder.split("/") if segment]
    if len(segments) > max_segments:
        return f"{_ELLIPSIS}/" + "/".join(segments[-max_segments:])
    if prefix:
        return prefix + "/".join(segments)
    return raw


class IconPathRichHandler(RichHandler):
    """Rich handler that condenses icon resolution records."""

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "icon_event", None)
        if not isinstance(event, str):
            return super().render_message(record, message)

        text = Text()
        _ = text.append(event, style="bold cyan")

        name = getattr(record, "icon_name", None)
        if name:
            _ = text.append(f" {name}", style="bold")
            size = getattr(record, "icon_size", None)
            if size is not None:
                _ = text.append(f"@{size}", style="dim")

        source = getattr(record, "icon_source", None)
        if source:
            _ = text.append(f" [{source}]", style="magenta")

        path = getattr(record, "icon_path", None)
        if path:
            _ = text.append(" ")
            _ = text.append(shorten_path(path), style="white")

        if message:
            _ = text.append(f" - {message}", style="dim")
        return text


__all__ = ["IconPathRichHandler", "shorten_path"]
