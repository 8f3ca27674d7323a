"""Species domain package.

This package contains the catalog's record types:
- Species: One monkey population with location and descriptive metadata
- ConservationStatus: Four-band classification derived from population
- CatalogStatistics: Aggregates computed over a catalog snapshot
"""

from monkeyexplorer.species.models import (
    ENDANGERED_POPULATION_THRESHOLD,
    CatalogStatistics,
    ConservationStatus,
    Species,
)
from monkeyexplorer.species.seed import DEFAULT_SEED, load_seed

__all__ = [
    "DEFAULT_SEED",
    "ENDANGERED_POPULATION_THRESHOLD",
    "CatalogStatistics",
    "ConservationStatus",
    "Species",
    "load_seed",
]
