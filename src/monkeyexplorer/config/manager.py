"""Configuration management backed by a YAML file."""

import shutil
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from monkeyexplorer.config.models import ExplorerConfig
from monkeyexplorer.system.path_resolver import PathResolver

logger = structlog.get_logger(__name__)


class ConfigManager:
    """Manages configuration loading and saving."""

    CURRENT_VERSION = "1.0.0"

    def __init__(
        self, path_resolver: PathResolver | None = None, config_path: Path | None = None
    ):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
            config_path: Explicit config file location, overriding the resolver.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = config_path or self.path_resolver.get_config_path()

    def load(self) -> ExplorerConfig:
        """Load and validate configuration, writing defaults if no file exists.

        Returns:
            ExplorerConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file is not valid YAML or fails validation
        """
        self._ensure_config_exists()
        raw_config = self._read_yaml()

        config_version = raw_config.get("config_version", self.CURRENT_VERSION)
        if config_version != self.CURRENT_VERSION:
            raise ValueError(
                f"Unsupported config version '{config_version}' "
                f"(expected {self.CURRENT_VERSION})"
            )

        try:
            return self._create_config_object(raw_config)
        except ValidationError as e:
            messages = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
            raise ValueError(f"Configuration validation failed: {', '.join(messages)}") from e

    def save(self, config: ExplorerConfig) -> None:
        """Save configuration to file with backup.

        Args:
            config: Configuration to save

        Raises:
            PermissionError: If config file cannot be written
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            backup_path = self.config_path.with_suffix(".yaml.backup")
            try:
                shutil.copy2(self.config_path, backup_path)
            except PermissionError:
                logger.warning("Could not create config backup", path=str(backup_path))

        config_yaml = yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False)
        self.config_path.write_text(config_yaml)
        logger.info("Configuration saved", path=str(self.config_path))

    def reload(self) -> ExplorerConfig:
        """Reload configuration from disk."""
        return self.load()

    def _ensure_config_exists(self) -> None:
        """Write a default config file if none exists yet."""
        if not self.config_path.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            defaults = ExplorerConfig(config_version=self.CURRENT_VERSION).model_dump()
            config_yaml = yaml.dump(defaults, default_flow_style=False, sort_keys=False)
            self.config_path.write_text(config_yaml)
            logger.debug("Default configuration written", path=str(self.config_path))

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        try:
            loaded = yaml.safe_load(self.config_path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse {self.config_path}: {e}") from e
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration in {self.config_path} must be a mapping")
        return loaded

    def _create_config_object(self, raw_config: dict[str, Any]) -> ExplorerConfig:
        """Create ExplorerConfig object from dictionary, dropping unknown keys."""
        expected_fields = set(ExplorerConfig.model_fields.keys())
        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning(
                "Ignoring unexpected config fields", fields=sorted(unexpected_fields)
            )

        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}
        return ExplorerConfig(**filtered_config)
