"""Species data models for the monkey catalog.

Derived values (endangered flag, conservation status, formatted coordinates) are
computed on access from the stored fields and never cached, so a refreshed catalog
can never carry stale classifications.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Policy constants. The endangered flag and the conservation bands are independent
# classifications; a population of 7000 is Vulnerable but not endangered.
ENDANGERED_POPULATION_THRESHOLD = 5000
CRITICALLY_ENDANGERED_BELOW = 500
ENDANGERED_BELOW = 2000
VULNERABLE_BELOW = 10000


class ConservationStatus(StrEnum):
    """Conservation status categories derived from population."""

    LEAST_CONCERN = "LeastConcern"
    VULNERABLE = "Vulnerable"
    ENDANGERED = "Endangered"
    CRITICALLY_ENDANGERED = "CriticallyEndangered"


def classify_population(population: int) -> ConservationStatus:
    """Map a population count onto its conservation band."""
    if population < CRITICALLY_ENDANGERED_BELOW:
        return ConservationStatus.CRITICALLY_ENDANGERED
    if population < ENDANGERED_BELOW:
        return ConservationStatus.ENDANGERED
    if population < VULNERABLE_BELOW:
        return ConservationStatus.VULNERABLE
    return ConservationStatus.LEAST_CONCERN


class Species(BaseModel):
    """A single catalog entry describing a named monkey population."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str = ""
    population: int = Field(ge=0)
    details: str = ""
    image: str = ""  # URL to a picture of the species
    latitude: float = 0.0
    longitude: float = 0.0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank species names."""
        if not v.strip():
            raise ValueError("Species name must not be blank")
        return v

    @property
    def is_endangered(self) -> bool:
        """Whether the population is under the endangered threshold."""
        return self.population < ENDANGERED_POPULATION_THRESHOLD

    @property
    def conservation_status(self) -> ConservationStatus:
        """Conservation band for the current population."""
        return classify_population(self.population)

    @property
    def coordinates_display(self) -> str:
        """Latitude and longitude rounded to two decimals."""
        return f"{self.latitude:.2f}, {self.longitude:.2f}"

    def __str__(self) -> str:
        """Return a one-line summary."""
        return f"{self.name} ({self.location}) - Population: {self.population:,}"


class CatalogStatistics(BaseModel):
    """Aggregate figures over one catalog snapshot."""

    model_config = ConfigDict(frozen=True)

    total_species: int = 0
    total_population: int = 0
    endangered_species: int = 0
    average_population: int = 0
    largest_population: int = 0
    smallest_population: int = 0
    random_access_count: int = 0
    unique_locations: int = 0

    @property
    def endangered_percentage(self) -> float:
        """Share of endangered species, one decimal place, 0.0 for an empty catalog."""
        if self.total_species == 0:
            return 0.0
        return round(self.endangered_species / self.total_species * 100, 1)

    def __str__(self) -> str:
        """Return a one-line summary."""
        return (
            f"Species: {self.total_species}, Population: {self.total_population:,}, "
            f"Endangered: {self.endangered_species} ({self.endangered_percentage}%), "
            f"Random Access: {self.random_access_count}"
        )
