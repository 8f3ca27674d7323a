"""Catalog service package."""

from monkeyexplorer.catalog.service import CatalogSeedError, CatalogService

__all__ = [
    "CatalogSeedError",
    "CatalogService",
]
