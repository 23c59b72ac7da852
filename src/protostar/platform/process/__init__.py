"""Out-of-process application launch."""

from .launcher import SHELL, spawn_detached, strip_field_codes

__all__ = ["SHELL", "spawn_detached", "strip_field_codes"]
