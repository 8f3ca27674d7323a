import random
from pathlib import Path

import pytest
import structlog

from monkeyexplorer.catalog.service import CatalogService
from monkeyexplorer.species.models import Species
from monkeyexplorer.system.path_resolver import PathResolver


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def path_resolver(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathResolver:
    """Provide a PathResolver rooted in a temporary data directory."""
    monkeypatch.delenv("MONKEYEXPLORER_CONFIG", raising=False)
    monkeypatch.setenv("MONKEYEXPLORER_DATA", str(tmp_path / "data"))
    return PathResolver()


@pytest.fixture
def sample_species() -> list[Species]:
    """Four species covering every population band used in the statistics examples."""
    return [
        Species(
            name="Baboon",
            location="Africa & Asia",
            population=100000,
            latitude=-8.783195,
            longitude=34.508523,
        ),
        Species(name="Capuchin Monkey", location="Central & South America", population=23000),
        Species(name="Red-shanked douc", location="Vietnam", population=1300),
        Species(name="Howler Monkey", location="South America", population=7000),
    ]


@pytest.fixture
def catalog_service(sample_species) -> CatalogService:
    """Provide a CatalogService over the sample species with a fixed random seed."""
    return CatalogService(seed_source=lambda: sample_species, rng=random.Random(1234))


@pytest.fixture
def empty_catalog_service() -> CatalogService:
    """Provide a CatalogService whose seed yields no species."""
    return CatalogService(seed_source=list)
