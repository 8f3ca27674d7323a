"""Configuration loading for the dependency injection container."""

from pathlib import Path

from monkeyexplorer.config import ConfigManager, ExplorerConfig
from monkeyexplorer.system.path_resolver import PathResolver


def get_config(
    path_resolver: PathResolver | None = None, config_path: Path | None = None
) -> ExplorerConfig:
    """Load Monkey Explorer configuration.

    Args:
        path_resolver: Optional PathResolver instance to use. If not provided,
                      creates a new PathResolver instance.
        config_path: Optional explicit config file, taking precedence over the resolver.

    Returns:
        ExplorerConfig: The loaded and validated configuration.
    """
    if path_resolver is None:
        path_resolver = PathResolver()
    return ConfigManager(path_resolver, config_path=config_path).load()
