"""
Summary: Verify content-addressed SVG rasterization and its failure modes.
Why: A cache hit must never re-render, and every failure must be distinct.
"""

from __future__ import annotations

import builtins
from pathlib import Path

import pytest
from PIL import Image

from protostar.features.icons import (
    MalformedDocumentError,
    RendererUnavailableError,
    SourceUnreadableError,
    WriteFailedError,
)
from protostar.platform.raster import Rasterizer, artifact_name

SVG = (
    b'<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">'
    b'<ellipse cx="50" cy="80" rx="46" ry="19" fill="#07c"/>'
    b'<path d="M34,41c-6,39,29,32,33,7c39,42-69,63-33-7" fill="#fc2"/>'
    b"</svg>"
)


def _cairosvg_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not _cairosvg_available(), reason="cairo library unavailable")


class CountingRenderer:
    """Write a placeholder bitmap and count invocations."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, int]] = []

    def __call__(self, data: bytes, size: int, source: Path, target: Path) -> None:
        del data
        self.calls.append((source, size))
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_bytes(b"png")


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    path = tmp_path / "icons" / "logo.svg"
    path.parent.mkdir()
    _ = path.write_bytes(SVG)
    return path


def test_artifact_name_encodes_name_length_and_size() -> None:
    assert artifact_name(Path("/a/b/logo.svg"), 1234, 64) == "logo.svg-1234-64.png"


def test_second_call_is_a_cache_hit(tmp_path: Path, svg_file: Path) -> None:
    renderer = CountingRenderer()
    rasterizer = Rasterizer(tmp_path / "cache", renderer=renderer)

    first = rasterizer.vector_to_raster(svg_file, 64)
    mtime = first.stat().st_mtime_ns
    second = rasterizer.vector_to_raster(svg_file, 64)

    assert first == second
    assert first.name == f"logo.svg-{len(SVG)}-64.png"
    assert len(renderer.calls) == 1
    assert second.stat().st_mtime_ns == mtime


def test_different_sizes_get_different_artifacts(tmp_path: Path, svg_file: Path) -> None:
    renderer = CountingRenderer()
    rasterizer = Rasterizer(tmp_path / "cache", renderer=renderer)

    small = rasterizer.vector_to_raster(svg_file, 32)
    large = rasterizer.vector_to_raster(svg_file, 256)

    assert small != large
    assert len(renderer.calls) == 2


def test_cache_hit_does_not_read_source(tmp_path: Path, svg_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    rasterizer = Rasterizer(tmp_path / "cache", renderer=CountingRenderer())
    expected = rasterizer.vector_to_raster(svg_file, 48)

    def _fail_read(self: Path) -> bytes:
        raise AssertionError(f"source read on cache hit: {self}")

    monkeypatch.setattr(Path, "read_bytes", _fail_read)
    assert rasterizer.vector_to_raster(svg_file, 48) == expected


def test_missing_source_is_unreadable(tmp_path: Path) -> None:
    rasterizer = Rasterizer(tmp_path / "cache", renderer=CountingRenderer())

    with pytest.raises(SourceUnreadableError):
        _ = rasterizer.vector_to_raster(tmp_path / "nope.svg", 64)


@requires_cairo
def test_real_render_produces_square_png(tmp_path: Path, svg_file: Path) -> None:
    rasterizer = Rasterizer(tmp_path / "cache")

    png = rasterizer.vector_to_raster(svg_file, 200)

    assert png.exists()
    assert png.suffix == ".png"
    with Image.open(png) as image:
        assert image.size == (200, 200)


@requires_cairo
def test_wide_drawing_is_fit_by_width(tmp_path: Path) -> None:
    wide = tmp_path / "wide.svg"
    _ = wide.write_bytes(
        b'<svg xmlns="http://www.w3.org/2000/svg" width="200" height="50">'
        b'<rect width="200" height="50" fill="#f00"/></svg>'
    )

    png = Rasterizer(tmp_path / "cache").vector_to_raster(wide, 64)

    with Image.open(png) as image:
        assert image.size == (64, 64)
        rgba = image.convert("RGBA")
        assert rgba.getpixel((63, 0))[3] == 255
        assert rgba.getpixel((0, 63))[3] == 0


@requires_cairo
def test_malformed_document(tmp_path: Path) -> None:
    broken = tmp_path / "broken.svg"
    _ = broken.write_bytes(b"this is not xml")

    with pytest.raises(MalformedDocumentError):
        _ = Rasterizer(tmp_path / "cache").vector_to_raster(broken, 64)


@requires_cairo
def test_write_failure(tmp_path: Path, svg_file: Path) -> None:
    blocker = tmp_path / "cache"
    _ = blocker.write_text("a file where the cache directory should be", encoding="utf-8")

    with pytest.raises(WriteFailedError):
        _ = Rasterizer(blocker / "nested").vector_to_raster(svg_file, 64)


@pytest.mark.parametrize("error", [ImportError("No module named 'cairosvg'"), OSError("no library called \"cairo-2\" was found")])
def test_missing_renderer_is_a_rasterization_error(
    tmp_path: Path, svg_file: Path, monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    real_import = builtins.__import__

    def _import(name: str, *args: object, **kwargs: object) -> object:
        if name == "cairosvg":
            raise error
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", _import)

    with pytest.raises(RendererUnavailableError, match="SVG renderer unavailable"):
        _ = Rasterizer(tmp_path / "cache").vector_to_raster(svg_file, 64)
    assert not (tmp_path / "cache").exists()
