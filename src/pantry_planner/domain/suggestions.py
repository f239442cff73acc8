"""Models for LLM meal suggestion results."""

from pydantic import BaseModel, Field


class MealSuggestion(BaseModel):
    """Single suggested meal."""

    title: str = Field(min_length=1)
    instructions: str
    ingredients: list[str]


class MealSuggestions(BaseModel):
    """Structured output for meal suggestions."""

    meals: list[MealSuggestion]
