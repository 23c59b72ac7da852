"""Desktop Entry Index: discovery and parsing of installed applications."""

from .adapters.desktop_file import parse_desktop_file
from .domain.models import DesktopEntryError, DesktopEntryParseError, DesktopEntryRecord
from .usecases.discovery import application_dirs, iter_desktop_files, load_desktop_entries

__all__ = [
    "DesktopEntryError",
    "DesktopEntryParseError",
    "DesktopEntryRecord",
    "application_dirs",
    "iter_desktop_files",
    "load_desktop_entries",
    "parse_desktop_file",
]
