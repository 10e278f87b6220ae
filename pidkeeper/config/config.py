"""Configuration management for pidkeeper."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..core.constants import DEFAULT_CONFIG_FILE
from ..core.exceptions import ConfigurationError
from ..io.directories import get_config_dir
from ..io.logger import get_logger
from .schema import PidkeeperConfig

logger = get_logger("config")


def merge_settings(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``override`` onto a copy of ``base``."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = value
    return merged


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )


class Config:
    """Settings for logging, marker locations and per-service overrides.

    Built-in defaults come from ``PidkeeperConfig``; a YAML file, if given
    or found at ``<config dir>/pidkeeper.yaml``, is merged on top and the
    result validated as a whole.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config: Dict[str, Any] = PidkeeperConfig().model_dump()
        self.config_path: Optional[Path] = None

        if config_path is not None:
            self.load_from_file(Path(config_path))
            return

        default_path = get_config_dir() / DEFAULT_CONFIG_FILE
        if default_path.is_file():
            logger.debug(f"Loading config from: {default_path}")
            self.load_from_file(default_path)

    def load_from_file(self, path: Path) -> None:
        """Merge a YAML file into the current settings.

        Raises:
            ConfigurationError: If the file is missing, not YAML, not a
                mapping, or fails validation
        """
        if not path.is_file():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        try:
            validated = PidkeeperConfig(**merge_settings(self.config, raw))
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {path}")
            raise ConfigurationError(
                f"Invalid configuration in {path}: {_format_validation_error(e)}"
            ) from e

        self.config = validated.model_dump()
        self.config_path = path

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a value by dotted path, e.g. ``defaults.poll_interval``."""
        node: Any = self.config
        for key in key_path.split("."):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def service_settings(self, name: str) -> Dict[str, Any]:
        """Overrides for the service with display name ``name``.

        Looked up directly rather than through ``get`` since display names
        may contain dots. Unset fields are dropped.
        """
        section = self.config["services"].get(name) or {}
        return {key: value for key, value in section.items() if value is not None}
