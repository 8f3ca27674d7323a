"""Monkey Explorer configuration package.

This package provides configuration management with:
- Validation through pydantic models
- Default config creation on first run
- YAML parsing and serialization
"""

from .manager import ConfigManager
from .models import CatalogConfig, ExplorerConfig, LoggingConfig

__all__ = [
    "CatalogConfig",
    "ConfigManager",
    "ExplorerConfig",
    "LoggingConfig",
]
