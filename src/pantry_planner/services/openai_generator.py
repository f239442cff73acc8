"""Meal generator that asks an LLM for pantry-based recipes."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from pantry_planner.domain.meal_plans import GeneratedMealEntry
from pantry_planner.domain.pantry import PantryEntry
from pantry_planner.domain.suggestions import MealSuggestions
from pantry_planner.services.generators import MealPlanGenerator

SUGGESTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "meals": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "instructions": {"type": "string"},
                    "ingredients": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["title", "instructions", "ingredients"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["meals"],
    "additionalProperties": False,
}


class RecipeSuggestionClient(Protocol):
    """Interface for LLM recipe suggestions."""

    async def suggest(
        self,
        *,
        model: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return structured meal suggestion data."""


@dataclass
class OpenAIMealPlanGenerator(MealPlanGenerator):
    """Builds a prompt from the pantry and validates the suggested meals."""

    client: RecipeSuggestionClient
    model: str
    name: str = "openai"

    async def generate(
        self, count: int, pantry: Sequence[PantryEntry]
    ) -> list[GeneratedMealEntry]:
        """Ask the model for ``count`` distinct dinners."""
        if count <= 0:
            return []
        raw = await self.client.suggest(
            model=self.model,
            prompt=build_prompt(count, pantry),
            schema=SUGGESTION_SCHEMA,
        )
        suggestions = MealSuggestions.model_validate(raw)
        return [
            GeneratedMealEntry(
                title=meal.title.strip(),
                source=f"openai:{self.model}",
                instructions=meal.instructions.strip(),
                generator=self.name,
                ingredients=tuple(meal.ingredients),
            )
            for meal in suggestions.meals[:count]
        ]


def build_prompt(count: int, pantry: Sequence[PantryEntry]) -> str:
    """Describe the pantry and the number of meals wanted."""
    if pantry:
        lines = "\n".join(
            f"- {entry.food.name}: {entry.quantity} {entry.unit or ''}".rstrip()
            for entry in pantry
        )
        stock = f"The pantry currently holds:\n{lines}\n"
    else:
        stock = "The pantry is empty.\n"
    return (
        f"Suggest {count} distinct home-cooked meals. "
        "Prefer recipes that use what is already in the pantry and keep "
        "extra shopping small. Give each meal a title, numbered step-by-step "
        "instructions and an ingredient list with quantities.\n"
        f"{stock}"
    )
