"""Meal generator backed by TheMealDB."""

from collections.abc import Sequence
from dataclasses import dataclass

from pantry_planner.adapters.mealdb_client import MealDbClient
from pantry_planner.domain.meal_plans import GeneratedMealEntry
from pantry_planner.domain.pantry import PantryEntry
from pantry_planner.services.generators import MealPlanGenerator
from pantry_planner.services.pantry_terms import pantry_food_names

_MAX_INGREDIENT_SLOTS = 20


@dataclass
class MealDbMealPlanGenerator(MealPlanGenerator):
    """Suggests meals whose main ingredient is in the pantry."""

    client: MealDbClient
    max_seed_ingredients: int = 3
    name: str = "themealdb"

    async def generate(
        self, count: int, pantry: Sequence[PantryEntry]
    ) -> list[GeneratedMealEntry]:
        """Return up to ``count`` meals seeded by the first pantry foods."""
        if count <= 0:
            return []
        meal_ids: list[str] = []
        for seed in pantry_food_names(pantry, limit=self.max_seed_ingredients):
            payload = await self.client.filter_by_ingredient(seed)
            for summary in payload.get("meals") or []:
                meal_id = str(summary["idMeal"])
                if meal_id not in meal_ids:
                    meal_ids.append(meal_id)
            if len(meal_ids) >= count:
                break

        entries: list[GeneratedMealEntry] = []
        for meal_id in meal_ids[:count]:
            details = await self.client.lookup_meal(meal_id)
            meals = details.get("meals") or []
            if not meals:
                continue
            entries.append(_parse_meal(meals[0]))
        return entries


def _parse_meal(meal: dict[str, object]) -> GeneratedMealEntry:
    ingredients: list[str] = []
    for slot in range(1, _MAX_INGREDIENT_SLOTS + 1):
        name = str(meal.get(f"strIngredient{slot}") or "").strip()
        measure = str(meal.get(f"strMeasure{slot}") or "").strip()
        if name:
            ingredients.append(f"{measure} {name}".strip())
    return GeneratedMealEntry(
        title=str(meal.get("strMeal") or "").strip(),
        source=str(meal.get("strSource") or "themealdb"),
        instructions=str(meal.get("strInstructions") or "").strip(),
        generator="themealdb",
        external_id=str(meal["idMeal"]),
        image_url=meal.get("strMealThumb") or None,
        ingredients=tuple(ingredients),
    )
