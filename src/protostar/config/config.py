"""Configuration management for the launcher."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from protostar.config.file_ops import toml_quote, write_text_file
from protostar.config.paths import default_config_path
from protostar.config.settings import DEFAULT_ICON_SIZE
from protostar.platform.logging import logger


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Launcher configuration."""

    # Icon theme to search; None means detect from the desktop settings
    icon_theme: str | None = None

    # Pixel size requested for application icons
    icon_size: int = DEFAULT_ICON_SIZE

    # Prefer glTF/GLB model icons over flat images when a theme ships both
    prefer_3d: bool = False

    # List entries flagged NoDisplay/Hidden as well
    show_hidden: bool = False

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize loaded values using field metadata and simple bounds."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        if isinstance(self.icon_theme, str) and not self.icon_theme.strip():
            self.icon_theme = None
        if not isinstance(self.icon_size, int) or self.icon_size <= 0:
            self.icon_size = DEFAULT_ICON_SIZE

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Returns:
            Path: The file written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# Protostar launcher configuration", ""]

        lines.append("# Icon theme (optional)")
        lines.append("# Leave unset to follow the desktop's GTK/KDE icon theme")
        lines.append('# Example: icon_theme = "Papirus"')
        if config["icon_theme"]:
            lines.append(f"icon_theme = {self._format_toml_value(config['icon_theme'])}")
        lines.append("")

        lines.append("# Pixel size requested for application icons")
        lines.append(f"icon_size = {self._format_toml_value(config['icon_size'])}")
        lines.append("")

        lines.append("# Prefer 3D model icons (.glb/.gltf) when available")
        lines.append(f"prefer_3d = {self._format_toml_value(config['prefer_3d'])}")
        lines.append("")

        lines.append("# Include applications marked NoDisplay or Hidden")
        lines.append(f"show_hidden = {self._format_toml_value(config['show_hidden'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return toml_quote(str(value))
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields defaults without writing anything.

        Args:
            path: Optional explicit config file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in configuration file: {config_file}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads the file again."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
