"""Canonical seed dataset for the monkey catalog."""

from collections.abc import Iterable, Mapping
from typing import Any

from monkeyexplorer.species.models import Species

_IMAGE_BASE = "https://raw.githubusercontent.com/jamesmontemagno/app-monkeys/master"

DEFAULT_SEED: tuple[dict[str, Any], ...] = (
    {
        "name": "Baboon",
        "location": "Africa & Asia",
        "details": (
            "Baboons are African and Arabian Old World monkeys belonging to the genus Papio, "
            "part of the subfamily Cercopithecinae."
        ),
        "image": f"{_IMAGE_BASE}/baboon.jpg",
        "population": 10000,
        "latitude": -8.783195,
        "longitude": 34.508523,
    },
    {
        "name": "Capuchin Monkey",
        "location": "Central & South America",
        "details": (
            "The capuchin monkeys are New World monkeys of the subfamily Cebinae. "
            "Prior to 2011, the subfamily contained only a single genus, Cebus."
        ),
        "image": f"{_IMAGE_BASE}/capuchin.jpg",
        "population": 23000,
        "latitude": 12.769013,
        "longitude": -85.602364,
    },
    {
        "name": "Blue Monkey",
        "location": "Central and East Africa",
        "details": (
            "The blue monkey or diademed monkey is a species of Old World monkey native to "
            "Central and East Africa, ranging from the upper Congo River basin east to the "
            "East African Rift and south to northern Angola and Zambia"
        ),
        "image": f"{_IMAGE_BASE}/bluemonkey.jpg",
        "population": 12000,
        "latitude": 1.957709,
        "longitude": 37.297204,
    },
    {
        "name": "Squirrel Monkey",
        "location": "Central & South America",
        "details": (
            "The squirrel monkeys are the New World monkeys of the genus Saimiri. They are "
            "the only genus in the subfamily Saimirinae. The name of the genus Saimiri is of "
            "Tupi origin, and was also used as an English name by early researchers."
        ),
        "image": f"{_IMAGE_BASE}/saimiri.jpg",
        "population": 11000,
        "latitude": -8.783195,
        "longitude": -55.491477,
    },
    {
        "name": "Golden Lion Tamarin",
        "location": "Brazil",
        "details": (
            "The golden lion tamarin also known as the golden marmoset, is a small New World "
            "monkey of the family Callitrichidae."
        ),
        "image": f"{_IMAGE_BASE}/tamarin.jpg",
        "population": 19000,
        "latitude": -14.235004,
        "longitude": -51.92528,
    },
    {
        "name": "Howler Monkey",
        "location": "South America",
        "details": (
            "Howler monkeys are among the largest of the New World monkeys. Fifteen species "
            "are currently recognised. Previously classified in the family Cebidae, they are "
            "now placed in the family Atelidae."
        ),
        "image": f"{_IMAGE_BASE}/alouatta.jpg",
        "population": 8000,
        "latitude": -8.783195,
        "longitude": -55.491477,
    },
    {
        "name": "Japanese Macaque",
        "location": "Japan",
        "details": (
            "The Japanese macaque, is a terrestrial Old World monkey species native to Japan. "
            "They are also sometimes known as the snow monkey because they live in areas "
            "where snow covers the ground for months each"
        ),
        "image": f"{_IMAGE_BASE}/macasa.jpg",
        "population": 1000,
        "latitude": 36.204824,
        "longitude": 138.252924,
    },
    {
        "name": "Mandrill",
        "location": "Southern Cameroon, Gabon, and Congo",
        "details": (
            "The mandrill is a primate of the Old World monkey family, closely related to the "
            "baboons and even more closely to the drill. It is found in southern Cameroon, "
            "Gabon, Equatorial Guinea, and Congo."
        ),
        "image": f"{_IMAGE_BASE}/mandrill.jpg",
        "population": 17000,
        "latitude": 7.369722,
        "longitude": 12.354722,
    },
    {
        "name": "Proboscis Monkey",
        "location": "Borneo",
        "details": (
            "The proboscis monkey or long-nosed monkey, known as the bekantan in Malay, is a "
            "reddish-brown arboreal Old World monkey that is endemic to the south-east Asian "
            "island of Borneo."
        ),
        "image": f"{_IMAGE_BASE}/borneo.jpg",
        "population": 15000,
        "latitude": 0.961883,
        "longitude": 114.55485,
    },
    {
        "name": "Sebastian",
        "location": "Seattle",
        "details": (
            "This little trouble maker lives in Seattle with James and loves traveling on "
            "adventures with James and tweeting @MotzMonkeys. He by far is an Android fanboy "
            "and is getting ready for the new Google Pixel 9!"
        ),
        "image": f"{_IMAGE_BASE}/sebastian.jpg",
        "population": 1,
        "latitude": 47.606209,
        "longitude": -122.332071,
    },
    {
        "name": "Henry",
        "location": "Phoenix",
        "details": (
            "An adorable Monkey who is traveling the world with Heather and live tweets his "
            "adventures @MotzMonkeys. His favorite platform is iOS by far and is excited for "
            "the new iPhone Xs!"
        ),
        "image": f"{_IMAGE_BASE}/henry.jpg",
        "population": 1,
        "latitude": 33.448377,
        "longitude": -112.074037,
    },
    {
        "name": "Red-shanked douc",
        "location": "Vietnam",
        "details": (
            "The red-shanked douc is a species of Old World monkey, among the most colourful "
            "of all primates. The douc is an arboreal and diurnal monkey that eats and sleeps "
            "in the trees of the forest."
        ),
        "image": f"{_IMAGE_BASE}/douc.jpg",
        "population": 1300,
        "latitude": 16.111648,
        "longitude": 108.262122,
    },
    {
        "name": "Mooch",
        "location": "Seattle",
        "details": (
            "An adorable Monkey who is traveling the world with Heather and live tweets his "
            "adventures @MotzMonkeys. Her favorite platform is iOS by far and is excited for "
            "the new iPhone 16!"
        ),
        "image": f"{_IMAGE_BASE}/Mooch.PNG",
        "population": 1,
        "latitude": 47.608013,
        "longitude": -122.335167,
    },
)


def build_species(records: Iterable[Species | Mapping[str, Any]]) -> list[Species]:
    """Validate raw records into Species models, preserving order.

    Raises:
        pydantic.ValidationError: If any record is malformed
    """
    return [
        record if isinstance(record, Species) else Species.model_validate(record)
        for record in records
    ]


def load_seed() -> list[Species]:
    """Materialize the default dataset."""
    return build_species(DEFAULT_SEED)
