"""Meal generator backed by Spoonacular recipe search."""

from collections.abc import Sequence
from dataclasses import dataclass

from pantry_planner.adapters.spoonacular_client import SpoonacularClient
from pantry_planner.domain.meal_plans import GeneratedMealEntry
from pantry_planner.domain.pantry import PantryEntry
from pantry_planner.services.generators import MealPlanGenerator
from pantry_planner.services.pantry_terms import pantry_food_names


@dataclass
class SpoonacularMealPlanGenerator(MealPlanGenerator):
    """Suggests recipes that use as many pantry foods as possible."""

    client: SpoonacularClient
    name: str = "spoonacular"

    async def generate(
        self, count: int, pantry: Sequence[PantryEntry]
    ) -> list[GeneratedMealEntry]:
        """Return up to ``count`` Spoonacular recipes for the pantry."""
        if count <= 0:
            return []
        payload = await self.client.search_by_ingredients(
            pantry_food_names(pantry), number=count
        )
        results = payload.get("results")
        if not isinstance(results, list):
            raise RuntimeError("Spoonacular response is missing results")
        entries = [_parse_recipe(item) for item in results if item.get("title")]
        return entries[:count]


def _parse_recipe(item: dict[str, object]) -> GeneratedMealEntry:
    recipe_id = item.get("id")
    return GeneratedMealEntry(
        title=str(item["title"]).strip(),
        source=str(item.get("sourceUrl") or "spoonacular"),
        instructions=_instructions(item),
        generator="spoonacular",
        external_id=str(recipe_id) if recipe_id is not None else None,
        image_url=item.get("image") or None,
        ingredients=tuple(
            str(ingredient.get("original") or ingredient.get("name")).strip()
            for ingredient in item.get("extendedIngredients") or []
            if ingredient.get("original") or ingredient.get("name")
        ),
    )


def _instructions(item: dict[str, object]) -> str:
    """Flatten analyzed instruction steps, falling back to the raw text."""
    steps: list[str] = []
    for block in item.get("analyzedInstructions") or []:
        for step in block.get("steps") or []:
            text = str(step.get("step") or "").strip()
            if text:
                steps.append(text)
    if steps:
        return "\n".join(f"{number}. {text}" for number, text in enumerate(steps, 1))
    return str(item.get("instructions") or "").strip()
