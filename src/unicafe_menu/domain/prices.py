"""Unicafe price tiers."""

from enum import Enum

from unicafe_menu.domain.errors import DecodeError


class PriceClass(Enum):
    """Closed set of price tiers printed on Unicafe menus."""

    BISTRO = "Bistro"
    MAUKKAASTI = "Maukkaasti"
    EDULLISESTI = "Edullisesti"
    KEITTO = "Keitto"
    KEVYESTI = "Kevyesti"
    MAKEASTI = "Makeasti"

    @classmethod
    def decode(cls, text: str) -> "PriceClass":
        """Return the tier named exactly ``text`` (case-sensitive)."""
        for entry in cls:
            if entry.value == text:
                return entry
        raise DecodeError(f"unknown price {text}")

    @property
    def symbol(self) -> str:
        """Euro-sign rendering of the tier."""
        return _SYMBOLS.get(self, "€")

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {
    PriceClass.BISTRO: "€€€€",
    PriceClass.MAUKKAASTI: "€€€",
    PriceClass.EDULLISESTI: "€€",
}
