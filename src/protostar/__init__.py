"""Protostar: desktop application discovery, icon resolution and launch."""

__version__ = "0.1.0"
