"""Tests for the default seed dataset."""

import pytest
from pydantic import ValidationError

from monkeyexplorer.species.models import Species
from monkeyexplorer.species.seed import DEFAULT_SEED, build_species, load_seed


class TestLoadSeed:
    """Test the canonical dataset."""

    def test_load_seed_returns_every_record_in_order(self):
        """Should validate all records preserving order."""
        species = load_seed()
        assert len(species) == len(DEFAULT_SEED) == 13
        assert [s.name for s in species] == [record["name"] for record in DEFAULT_SEED]
        assert all(isinstance(s, Species) for s in species)

    def test_names_are_unique_ignoring_case(self):
        """Should not contain case-insensitive duplicate names."""
        names = [s.name.casefold() for s in load_seed()]
        assert len(names) == len(set(names))

    def test_known_entries(self):
        """Should carry the canonical values."""
        by_name = {s.name: s for s in load_seed()}
        assert by_name["Baboon"].population == 10000
        assert by_name["Baboon"].location == "Africa & Asia"
        assert by_name["Red-shanked douc"].population == 1300
        assert by_name["Mooch"].image.endswith("/Mooch.PNG")

    def test_load_seed_returns_fresh_list(self):
        """Should build a new list on every call."""
        assert load_seed() is not load_seed()


class TestBuildSpecies:
    """Test record validation."""

    def test_accepts_models_and_mappings(self):
        """Should pass Species through and validate mappings."""
        existing = Species(name="Henry", population=1)
        result = build_species([existing, {"name": "Mooch", "population": 1}])
        assert result[0] is existing
        assert result[1] == Species(name="Mooch", population=1)

    def test_invalid_record_raises(self):
        """Should surface validation errors for malformed records."""
        with pytest.raises(ValidationError):
            build_species([{"name": "Baboon"}])
