"""System domain package.

This package contains system-level components:
- PathResolver: Path resolution and management
"""

from monkeyexplorer.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
]
