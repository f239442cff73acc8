"""Greedy selection of the user's own recipes against the pantry."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pantry_planner.domain.meal_plans import RecipeMealEntry
from pantry_planner.domain.pantry import PantryEntry
from pantry_planner.domain.recipes import Recipe
from pantry_planner.services.scoring import find_pantry_match, score_recipe

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredRecipe:
    """Recipe paired with its score for one selection round."""

    recipe: Recipe
    score: int


def select_locally(
    requested_count: int,
    recipes: Sequence[Recipe],
    pantry: Sequence[PantryEntry],
) -> list[RecipeMealEntry]:
    """Pick up to ``requested_count`` recipes that best use the pantry.

    Each round rescores the remaining recipes against what is left of the
    pantry, drops recipes that score nothing, and takes the top scorer
    (first in catalog order on ties). Every pantry entry matching one of
    the chosen recipe's ingredients is then consumed whole, whatever
    quantity the recipe needs. The inputs are copied and never mutated.
    """
    remaining_recipes = list(recipes)
    working_pantry = list(pantry)
    selected: list[RecipeMealEntry] = []

    for round_number in range(1, requested_count + 1):
        scored = [
            ScoredRecipe(recipe=recipe, score=score_recipe(recipe, working_pantry))
            for recipe in remaining_recipes
        ]
        scored = [item for item in scored if item.score > 0]
        remaining_recipes = [item.recipe for item in scored]
        if not scored:
            _logger.debug(
                "Local selection exhausted at round %s: selected=%s",
                round_number,
                len(selected),
            )
            break

        best = scored[0]
        for item in scored[1:]:
            if item.score > best.score:
                best = item

        remaining_recipes.remove(best.recipe)
        working_pantry = _consume_ingredients(best.recipe, working_pantry)
        selected.append(RecipeMealEntry.from_recipe(best.recipe))
        _logger.debug(
            "Local selection round %s: recipe_id=%s score=%s pantry_left=%s",
            round_number,
            best.recipe.id,
            best.score,
            len(working_pantry),
        )

    return selected


def _consume_ingredients(
    recipe: Recipe, pantry: list[PantryEntry]
) -> list[PantryEntry]:
    """Remove every pantry entry used by the recipe."""
    for ingredient in recipe.ingredients:
        entry = find_pantry_match(ingredient.food, pantry)
        if entry is not None:
            pantry.remove(entry)
    return pantry
