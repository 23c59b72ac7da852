"""Configuration package: paths, persisted settings and constants."""
