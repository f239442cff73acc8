"""Meal plan generation service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from pantry_planner.domain.meal_plans import MealPlanDraft, MealPlanEntry
from pantry_planner.domain.pantry import PantryEntry
from pantry_planner.domain.recipes import Recipe
from pantry_planner.services.generators import GeneratorChain
from pantry_planner.services.selection import select_locally

_logger = logging.getLogger(__name__)


class MealPlanRequestError(ValueError):
    """Raised when a generation request is invalid."""


class MealPlanDataError(RuntimeError):
    """Raised when pantry or recipe data cannot be loaded."""


class PantryRepository(Protocol):
    """Read interface for a user's pantry."""

    def list_pantry(self, user_id: UUID) -> list[PantryEntry]:
        """Return the user's pantry entries with their foods."""


class RecipeRepository(Protocol):
    """Read interface for a user's recipes."""

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return the user's recipes with ingredients, in catalog order."""


@dataclass
class MealPlanService:
    """Builds meal plan drafts from local recipes and external generators."""

    pantry_repository: PantryRepository
    recipe_repository: RecipeRepository
    generator_chain: GeneratorChain

    async def generate_meal_plan(
        self,
        requested_count: int,
        user_id: UUID,
        force_external_only: bool = False,
        start_date: date | None = None,
    ) -> MealPlanDraft:
        """Generate a draft with at most ``requested_count`` meals.

        The user's recipes are tried first unless ``force_external_only`` is
        set; any remaining slots are offered to the generator chain. The
        draft may be shorter than requested when no source can fill it.

        Generators see the full pantry snapshot as loaded, not the copy
        depleted by local selection.
        """
        if requested_count < 0:
            raise MealPlanRequestError("Meal count must not be negative.")
        if requested_count == 0:
            return MealPlanDraft(start_date=start_date)

        _logger.info(
            "Generating meal plan: user_id=%s meals=%s external_only=%s",
            user_id,
            requested_count,
            force_external_only,
        )
        meals: list[MealPlanEntry] = []
        pantry: list[PantryEntry] | None = None
        if not force_external_only:
            recipes = self._load(self.recipe_repository.list_recipes, user_id)
            pantry = self._load(self.pantry_repository.list_pantry, user_id)
            meals.extend(select_locally(requested_count, recipes, pantry))
            if len(meals) == requested_count:
                _logger.info(
                    "Meal plan filled locally: user_id=%s meals=%s",
                    user_id,
                    len(meals),
                )
                return MealPlanDraft(meals=tuple(meals), start_date=start_date)

        if pantry is None:
            pantry = self._load(self.pantry_repository.list_pantry, user_id)
        deficit = requested_count - len(meals)
        external = await self.generator_chain.fill_remaining(deficit, tuple(pantry))
        meals.extend(external)

        if len(meals) < requested_count:
            _logger.warning(
                "Meal plan short of request: user_id=%s meals=%s requested=%s",
                user_id,
                len(meals),
                requested_count,
            )
        _logger.info(
            "Meal plan generated: user_id=%s local=%s external=%s",
            user_id,
            len(meals) - len(external),
            len(external),
        )
        return MealPlanDraft(meals=tuple(meals), start_date=start_date)

    @staticmethod
    def _load(loader: Callable[[UUID], list], user_id: UUID) -> list:
        try:
            return loader(user_id)
        except Exception as exc:
            raise MealPlanDataError(
                f"Failed to load planning data for user {user_id}"
            ) from exc
