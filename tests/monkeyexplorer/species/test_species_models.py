"""Tests for species models and derived classifications."""

import pytest
from pydantic import ValidationError

from monkeyexplorer.species.models import (
    CatalogStatistics,
    ConservationStatus,
    Species,
    classify_population,
)


class TestConservationStatus:
    """Test population banding."""

    @pytest.mark.parametrize(
        "population,expected",
        [
            (0, ConservationStatus.CRITICALLY_ENDANGERED),
            (499, ConservationStatus.CRITICALLY_ENDANGERED),
            (500, ConservationStatus.ENDANGERED),
            (1999, ConservationStatus.ENDANGERED),
            (2000, ConservationStatus.VULNERABLE),
            (9999, ConservationStatus.VULNERABLE),
            (10000, ConservationStatus.LEAST_CONCERN),
            (250000, ConservationStatus.LEAST_CONCERN),
        ],
    )
    def test_classify_population_bands(self, population, expected):
        """Should place populations in the fixed bands."""
        assert classify_population(population) == expected

    def test_status_values_match_display_names(self):
        """Should render enum members with their display values."""
        assert str(ConservationStatus.CRITICALLY_ENDANGERED) == "CriticallyEndangered"
        assert f"{ConservationStatus.LEAST_CONCERN}" == "LeastConcern"


class TestSpecies:
    """Test the Species model."""

    def test_defaults(self):
        """Should default optional fields."""
        species = Species(name="Mandrill", population=17000)
        assert species.location == ""
        assert species.details == ""
        assert species.image == ""
        assert species.latitude == 0.0
        assert species.longitude == 0.0

    def test_douc_is_endangered_on_both_scales(self):
        """Population 1300 is Endangered and flagged endangered."""
        species = Species(name="Red-shanked douc", location="Vietnam", population=1300)
        assert species.conservation_status == ConservationStatus.ENDANGERED
        assert species.is_endangered is True

    def test_vulnerable_but_not_endangered(self):
        """Population 7000 is Vulnerable while staying above the endangered threshold."""
        species = Species(name="Howler Monkey", location="South America", population=7000)
        assert species.conservation_status == ConservationStatus.VULNERABLE
        assert species.is_endangered is False

    def test_endangered_threshold_boundary(self):
        """Should flag populations strictly below 5000."""
        assert Species(name="A", population=4999).is_endangered is True
        assert Species(name="B", population=5000).is_endangered is False

    def test_coordinates_display(self):
        """Should format coordinates to two decimals."""
        species = Species(
            name="Baboon", population=10000, latitude=-8.783195, longitude=34.508523
        )
        assert species.coordinates_display == "-8.78, 34.51"

    def test_coordinates_display_defaults(self):
        """Should format missing coordinates as zeros."""
        assert Species(name="Henry", population=1).coordinates_display == "0.00, 0.00"

    def test_str(self):
        """Should render a one-line summary with thousands separators."""
        species = Species(
            name="Capuchin Monkey", location="Central & South America", population=23000
        )
        assert str(species) == "Capuchin Monkey (Central & South America) - Population: 23,000"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        """Should reject blank names."""
        with pytest.raises(ValidationError):
            Species(name=name, population=10)

    def test_negative_population_rejected(self):
        """Should reject negative populations."""
        with pytest.raises(ValidationError):
            Species(name="Baboon", population=-1)

    def test_frozen(self):
        """Should not allow mutation after creation."""
        species = Species(name="Baboon", population=10000)
        with pytest.raises(ValidationError):
            species.population = 1

    def test_derived_values_follow_population(self):
        """Should compute derived values from the stored population each time."""
        species = Species(name="Baboon", population=10000)
        updated = species.model_copy(update={"population": 300})
        assert species.conservation_status == ConservationStatus.LEAST_CONCERN
        assert updated.conservation_status == ConservationStatus.CRITICALLY_ENDANGERED
        assert updated.is_endangered is True


class TestCatalogStatistics:
    """Test the statistics model."""

    def test_endangered_percentage(self):
        """Should round the endangered share to one decimal."""
        stats = CatalogStatistics(total_species=3, endangered_species=1)
        assert stats.endangered_percentage == 33.3

    def test_endangered_percentage_empty(self):
        """Should report 0 for an empty catalog."""
        assert CatalogStatistics().endangered_percentage == 0.0

    def test_str(self):
        """Should render a one-line summary."""
        stats = CatalogStatistics(
            total_species=4,
            total_population=131300,
            endangered_species=1,
            random_access_count=2,
        )
        assert str(stats) == (
            "Species: 4, Population: 131,300, Endangered: 1 (25.0%), Random Access: 2"
        )
