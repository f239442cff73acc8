"""Domain models for generated meal plans."""

from dataclasses import dataclass
from datetime import date
from typing import Literal

from pantry_planner.domain.recipes import Recipe


@dataclass(frozen=True)
class RecipeMealEntry:
    """Meal slot filled by one of the user's own recipes."""

    recipe_id: int
    title: str
    source: str
    instructions: str
    image_url: str | None = None
    kind: Literal["recipe"] = "recipe"

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeMealEntry":
        """Build an entry that references an existing recipe."""
        return cls(
            recipe_id=recipe.id,
            title=recipe.title,
            source=recipe.source,
            instructions=recipe.instructions,
            image_url=recipe.image_url,
        )


@dataclass(frozen=True)
class GeneratedMealEntry:
    """Meal slot filled by an external generator; not persisted yet."""

    title: str
    source: str
    instructions: str
    generator: str
    external_id: str | None = None
    image_url: str | None = None
    ingredients: tuple[str, ...] = ()
    kind: Literal["generated"] = "generated"


MealPlanEntry = RecipeMealEntry | GeneratedMealEntry


@dataclass(frozen=True)
class MealPlanDraft:
    """Ordered meal entries proposed for a user, before saving."""

    meals: tuple[MealPlanEntry, ...] = ()
    start_date: date | None = None

    def __len__(self) -> int:
        return len(self.meals)

    @property
    def recipe_ids(self) -> list[int]:
        """Ids of the user's recipes referenced by this draft."""
        return [meal.recipe_id for meal in self.meals if meal.kind == "recipe"]
