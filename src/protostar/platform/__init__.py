"""Infrastructure adapters: logging, caches, theme lookup, rasterization, processes."""
