"""Utility helpers for configuration and cache file persistence."""

from __future__ import annotations

import os
import threading
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


def replace_text_file(path: Path, content: str) -> None:
    """Rewrite ``path`` through a sibling temporary file and ``os.replace``.

    Readers in other processes see either the previous or the new content,
    never a truncated file.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    temporary = path.with_name(f".{path.name}.{os.getpid()}.{threading.get_ident()}.tmp")
    try:
        _ = temporary.write_text(content, encoding="utf-8")
        os.replace(temporary, path)
    finally:
        if temporary.exists():
            temporary.unlink()


def toml_quote(value: str) -> str:
    """Quote ``value`` as a TOML basic string."""

    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


__all__ = ["replace_text_file", "toml_quote", "write_text_file"]
