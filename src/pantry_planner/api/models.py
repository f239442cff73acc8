"""Pydantic models for the meal plan API."""

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from pantry_planner.domain.meal_plans import MealPlanDraft, MealPlanEntry


class GenerateMealPlanRequest(BaseModel):
    """Request body for meal plan generation."""

    user_id: UUID
    meals: int
    start_date: date | None = None
    use_external: bool = False


class MealPlanEntryResponse(BaseModel):
    """One meal in a generated plan."""

    kind: Literal["recipe", "generated"]
    recipe_id: int | None = None
    title: str
    source: str
    instructions: str
    image_url: str | None = None
    generator: str | None = None
    external_id: str | None = None
    ingredients: list[str] = []

    @classmethod
    def from_entry(cls, entry: MealPlanEntry) -> "MealPlanEntryResponse":
        """Convert a domain meal entry."""
        if entry.kind == "recipe":
            return cls(
                kind="recipe",
                recipe_id=entry.recipe_id,
                title=entry.title,
                source=entry.source,
                instructions=entry.instructions,
                image_url=entry.image_url,
            )
        return cls(
            kind="generated",
            title=entry.title,
            source=entry.source,
            instructions=entry.instructions,
            image_url=entry.image_url,
            generator=entry.generator,
            external_id=entry.external_id,
            ingredients=list(entry.ingredients),
        )


class MealPlanDraftResponse(BaseModel):
    """Generated meal plan, not yet saved."""

    start_date: date | None = None
    meals: list[MealPlanEntryResponse]

    @classmethod
    def from_draft(cls, draft: MealPlanDraft) -> "MealPlanDraftResponse":
        """Convert a domain draft."""
        return cls(
            start_date=draft.start_date,
            meals=[MealPlanEntryResponse.from_entry(meal) for meal in draft.meals],
        )
