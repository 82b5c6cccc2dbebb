"""Configuration management for resyslib."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from resyslib.config.file_ops import write_text_file
from resyslib.config.paths import default_config_path
from resyslib.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Console verbosity (DEBUG, INFO, WARNING, ERROR)
    console_log_level: str = "INFO"

    # Batch directory deletion keeps going after a failure when true
    delete_continue_on_error: bool = True

    # Text encoding used when concatenating files
    concat_encoding: str = "utf-8"

    # Seconds to wait for platform probes such as ``getprop``
    platform_probe_timeout: float = 5.0

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the written location."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# resyslib Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/resyslib.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        lines.append("# Keep deleting the remaining directories after a failure")
        lines.append(
            "delete_continue_on_error = "
            f"{self._format_toml_value(config['delete_continue_on_error'])}"
        )
        lines.append("")

        lines.append("# Encoding used to read and write concatenated text files")
        lines.append(f"concat_encoding = {self._format_toml_value(config['concat_encoding'])}")
        lines.append("")

        lines.append("# Seconds to wait for platform detection probes")
        lines.append(
            "platform_probe_timeout = "
            f"{self._format_toml_value(config['platform_probe_timeout'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Args:
            source: Optional explicit file; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if source is None and cls._instance is not None:
            return cls._instance

        config_file = source or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)

        if source is None:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()
