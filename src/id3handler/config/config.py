"""Configuration management for id3handler."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from id3handler.config.file_ops import write_text_file
from id3handler.config.paths import default_config_path
from id3handler.platform.logging import logger

ID3_VERSION_DEFAULT: Final[int] = 4
SUPPORTED_ID3_VERSIONS: Final[tuple[int, ...]] = (3, 4)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; the default log location is used when unset
    log_file: Path | None = _path_field()

    # ID3v2 minor version written on update (3 or 4)
    id3_version: int = ID3_VERSION_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and clamp the ID3 version to a supported one."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.id3_version not in SUPPORTED_ID3_VERSIONS:
            logger.warning(
                "Unsupported id3_version %r in configuration; using %d",
                self.id3_version,
                ID3_VERSION_DEFAULT,
            )
            self.id3_version = ID3_VERSION_DEFAULT

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# id3handler Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/id3handler.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# ID3v2 version written by 'update' (3 or 4, default 4)")
        lines.append(f"id3_version = {self._format_toml_value(config['id3_version'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one if absent.

        Returns:
            Config: Loaded configuration object (cached after the first call).
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown_keys = sorted(set(config_dict) - known)
                if unknown_keys:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown_keys))
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                instance.save()
                logger.debug("Created default configuration at %s", config_file)

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next load re-reads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ID3_VERSION_DEFAULT", "SUPPORTED_ID3_VERSIONS"]
