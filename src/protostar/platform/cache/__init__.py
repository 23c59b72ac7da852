"""Persistent icon cache."""

from .image_cache import CacheKey, ImageCache

__all__ = ["CacheKey", "ImageCache"]
