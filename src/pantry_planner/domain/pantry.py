"""Domain models for foods and pantry contents."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FoodRef:
    """Reference to a catalog food."""

    id: int
    name: str

    @property
    def match_key(self) -> str:
        """Normalized name used to pair pantry entries with ingredients."""
        return self.name.strip().casefold()


@dataclass(frozen=True)
class PantryEntry:
    """Quantity of a food a user currently has on hand."""

    food: FoodRef
    quantity: Decimal
    unit: str | None = None
