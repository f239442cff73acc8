"""Pantry coverage scoring for recipes."""

from collections.abc import Sequence

from pantry_planner.domain.pantry import FoodRef, PantryEntry
from pantry_planner.domain.recipes import Recipe

FULL_COVERAGE_POINTS = 2
PARTIAL_COVERAGE_POINTS = 1


def find_pantry_match(
    food: FoodRef, pantry: Sequence[PantryEntry]
) -> PantryEntry | None:
    """Return the first pantry entry whose food name matches, ignoring case.

    Matching is by name only: two foods with the same name and different ids
    are treated as the same food.
    """
    key = food.match_key
    for entry in pantry:
        if entry.food.match_key == key:
            return entry
    return None


def score_recipe(recipe: Recipe, pantry: Sequence[PantryEntry]) -> int:
    """Score how well the pantry covers a recipe's ingredients.

    Each ingredient earns 2 points when the pantry holds at least the
    required quantity, 1 point when the food is present in a smaller
    quantity, and nothing when it is missing.
    """
    score = 0
    for ingredient in recipe.ingredients:
        entry = find_pantry_match(ingredient.food, pantry)
        if entry is None:
            continue
        if entry.quantity >= ingredient.quantity:
            score += FULL_COVERAGE_POINTS
        else:
            score += PARTIAL_COVERAGE_POINTS
    return score
