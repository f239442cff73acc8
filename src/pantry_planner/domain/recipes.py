"""Domain models for user recipes."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from pantry_planner.domain.pantry import FoodRef


@dataclass(frozen=True)
class RecipeIngredient:
    """Food and quantity required by a recipe."""

    food: FoodRef
    quantity: Decimal
    unit: str | None = None


@dataclass(frozen=True)
class Recipe:
    """A recipe owned by a user, with its ingredients loaded."""

    id: int
    user_id: UUID
    title: str
    source: str
    instructions: str
    ingredients: tuple[RecipeIngredient, ...] = ()
    image_url: str | None = None
