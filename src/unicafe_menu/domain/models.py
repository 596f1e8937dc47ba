"""Domain models for the Unicafe menu client."""

from dataclasses import dataclass

from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.prices import PriceClass


@dataclass(frozen=True)
class Restaurant:
    """Restaurant listed by the API."""

    id: int
    name: str


@dataclass(frozen=True)
class Price:
    """Price tier of a food item."""

    name: PriceClass


@dataclass(frozen=True)
class Food:
    """Single dish on a menu."""

    name: str
    price: Price


@dataclass(frozen=True)
class Menu:
    """Menu of one day; no foods means nothing is listed for that date."""

    date: MenuDate
    foods: tuple[Food, ...]
