"""SVG rasterization with a content-addressed disk cache."""

from .rasterizer import Rasterizer, Renderer, artifact_name, render_svg

__all__ = ["Rasterizer", "Renderer", "artifact_name", "render_svg"]
