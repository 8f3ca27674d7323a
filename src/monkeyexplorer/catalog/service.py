"""Catalog service owning the species collection and the random-pick counter.

The catalog is materialized lazily on first access and then treated as an
immutable snapshot. Readers grab the current tuple reference and work on it
without locking; the lock only guards first-time construction, the swap
performed by ``refresh`` and every read or write of the access counter.
"""

import random
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import structlog

from monkeyexplorer.species.models import CatalogStatistics, Species
from monkeyexplorer.species.seed import build_species, load_seed

logger = structlog.get_logger(__name__)

SeedSource = Callable[[], Iterable[Species | Mapping[str, Any]]]


class CatalogSeedError(RuntimeError):
    """Raised when the seed source cannot produce a valid catalog."""


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CatalogService:
    """Query, search and aggregation operations over the species catalog."""

    def __init__(
        self,
        seed_source: SeedSource = load_seed,
        rng: random.Random | None = None,
        random_seed: int | None = None,
    ):
        """Initialize the service.

        Args:
            seed_source: Zero-argument callable returning species records
            rng: Random generator to draw from; created once here when omitted
            random_seed: Seed for the generator created when ``rng`` is omitted
        """
        self._seed_source = seed_source
        self._rng = rng if rng is not None else random.Random(random_seed)
        self._catalog: tuple[Species, ...] | None = None
        self._random_access_count = 0
        self._lock = threading.Lock()

    @property
    def random_access_count(self) -> int:
        """Number of successful random picks since start or last reset."""
        with self._lock:
            return self._random_access_count

    def _build_catalog(self) -> tuple[Species, ...]:
        try:
            catalog = tuple(build_species(self._seed_source()))
        except Exception as e:
            logger.error("Failed to build species catalog", error=str(e))
            raise CatalogSeedError(f"Invalid species seed data: {e}") from e

        seen: dict[str, str] = {}
        for species in catalog:
            key = species.name.lower()
            if key in seen:
                logger.warning(
                    "Duplicate species name in catalog",
                    name=species.name,
                    first=seen[key],
                )
            else:
                seen[key] = species.name

        logger.debug("Species catalog built", species_count=len(catalog))
        return catalog

    def _snapshot(self) -> tuple[Species, ...]:
        catalog = self._catalog
        if catalog is not None:
            return catalog
        with self._lock:
            if self._catalog is None:
                self._catalog = self._build_catalog()
            return self._catalog

    def list_all(self, sort_by_name: bool = False) -> list[Species]:
        """Return every species, in catalog order or sorted by name."""
        catalog = self._snapshot()
        if sort_by_name:
            return sorted(catalog, key=lambda s: s.name.lower())
        return list(catalog)

    def find_by_name(self, name: str) -> Species | None:
        """Find a species by exact name, ignoring case.

        Args:
            name: Species name to look up

        Returns:
            The first matching species, or None for blank input or no match
        """
        if _is_blank(name):
            return None
        wanted = name.lower()
        return next((s for s in self._snapshot() if s.name.lower() == wanted), None)

    def search_by_name(self, term: str) -> list[Species]:
        """Return species whose name contains ``term``, ignoring case."""
        if _is_blank(term):
            return []
        needle = term.lower()
        return [s for s in self._snapshot() if needle in s.name.lower()]

    def suggestions(self, term: str, limit: int = 3) -> list[Species]:
        """Return at most ``limit`` name matches for "did you mean" prompts."""
        return self.search_by_name(term)[: max(limit, 0)]

    def filter_by_location(self, term: str) -> list[Species]:
        """Return species whose location contains ``term``, ignoring case."""
        if _is_blank(term):
            return []
        needle = term.lower()
        return [s for s in self._snapshot() if needle in s.location.lower()]

    def list_endangered(self) -> list[Species]:
        """Return endangered species in catalog order."""
        return [s for s in self._snapshot() if s.is_endangered]

    def pick_random(self) -> Species | None:
        """Pick a species uniformly at random and count the access.

        Returns:
            The chosen species, or None when the catalog is empty. The counter
            is left untouched in the empty case.
        """
        catalog = self._snapshot()
        if not catalog:
            logger.debug("Random pick requested on empty catalog")
            return None

        with self._lock:
            choice = self._rng.choice(catalog)
            self._random_access_count += 1
            count = self._random_access_count

        logger.info("Random species picked", name=choice.name, random_access_count=count)
        return choice

    def statistics(self) -> CatalogStatistics:
        """Compute aggregates over the current catalog snapshot."""
        catalog = self._snapshot()
        total = len(catalog)
        populations = [s.population for s in catalog]
        total_population = sum(populations)

        return CatalogStatistics(
            total_species=total,
            total_population=total_population,
            endangered_species=sum(1 for s in catalog if s.is_endangered),
            average_population=total_population // total if total else 0,
            largest_population=max(populations, default=0),
            smallest_population=min(populations, default=0),
            random_access_count=self.random_access_count,
            unique_locations=len({s.location for s in catalog}),
        )

    def reset_access_count(self) -> None:
        """Set the random access counter back to zero."""
        with self._lock:
            self._random_access_count = 0
        logger.info("Random access count reset")

    def refresh(self) -> None:
        """Rebuild the catalog from the seed source.

        The new catalog is built before the swap, so a failing seed leaves the
        current catalog in place. The access counter is not affected. A catalog
        that was never loaded goes through the lazy path and is built only once.

        Raises:
            CatalogSeedError: If the seed source produces invalid data
        """
        if self._catalog is None:
            catalog = self._snapshot()
            logger.info("Species catalog loaded", species_count=len(catalog))
            return

        catalog = self._build_catalog()
        with self._lock:
            self._catalog = catalog
        logger.info("Species catalog refreshed", species_count=len(catalog))
