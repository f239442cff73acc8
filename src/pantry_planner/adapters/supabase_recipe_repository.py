"""Supabase repository for recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from pantry_planner.adapters.supabase_pantry_repository import (
    parse_food,
    parse_quantity,
)
from pantry_planner.domain.recipes import Recipe, RecipeIngredient
from pantry_planner.services.meal_plans import RecipeRepository

_RECIPE_COLUMNS = (
    "id, user_id, title, source, instructions, image_url, "
    "recipe_ingredients(quantity, unit, food:foods(id, name))"
)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for reading a user's recipes."""

    client: Client

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return recipes with ingredients, ordered by id."""
        response = (
            self.client.table("recipes")
            .select(_RECIPE_COLUMNS)
            .eq("user_id", str(user_id))
            .order("id")
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row with embedded ingredients."""
    ingredients = tuple(
        RecipeIngredient(
            food=parse_food(item.get("food")),
            quantity=parse_quantity(item.get("quantity")),
            unit=item.get("unit"),
        )
        for item in row.get("recipe_ingredients") or []
    )
    return Recipe(
        id=int(row["id"]),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title", "")),
        source=str(row.get("source") or ""),
        instructions=str(row.get("instructions") or ""),
        ingredients=ingredients,
        image_url=row.get("image_url"),
    )
