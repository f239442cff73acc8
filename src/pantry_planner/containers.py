"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pantry_planner.adapters.mealdb_client import HttpxMealDbClient
from pantry_planner.adapters.openai_recipe_client import OpenAIRecipeClient
from pantry_planner.adapters.spoonacular_client import HttpxSpoonacularClient
from pantry_planner.adapters.supabase_pantry_repository import (
    SupabasePantryRepository,
)
from pantry_planner.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from pantry_planner.config import Settings, parse_generator_names
from pantry_planner.services.generators import GeneratorChain, MealPlanGenerator
from pantry_planner.services.meal_plans import MealPlanService
from pantry_planner.services.mealdb import MealDbMealPlanGenerator
from pantry_planner.services.openai_generator import OpenAIMealPlanGenerator
from pantry_planner.services.spoonacular import SpoonacularMealPlanGenerator

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_plan_service: MealPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_generators(
    settings: Settings,
) -> tuple[list[MealPlanGenerator], list[Callable[[], Awaitable[None]]]]:
    """Create the configured generators in priority order with their closers."""
    generators: list[MealPlanGenerator] = []
    closers: list[Callable[[], Awaitable[None]]] = []
    for name in parse_generator_names(settings.meal_plan_generators):
        if name == "spoonacular":
            if not settings.spoonacular_api_key:
                _logger.info("Spoonacular generator disabled: no API key")
                continue
            spoonacular_client = HttpxSpoonacularClient.create(
                api_key=settings.spoonacular_api_key,
                base_url=settings.spoonacular_base_url,
                timeout_seconds=settings.spoonacular_timeout_seconds,
            )
            generators.append(SpoonacularMealPlanGenerator(spoonacular_client))
            closers.append(spoonacular_client.close)
        elif name == "themealdb":
            mealdb_client = HttpxMealDbClient.create(
                base_url=settings.mealdb_base_url,
                timeout_seconds=settings.mealdb_timeout_seconds,
            )
            generators.append(MealDbMealPlanGenerator(mealdb_client))
            closers.append(mealdb_client.close)
        elif name == "openai":
            if not settings.openai_api_key:
                _logger.info("OpenAI generator disabled: no API key")
                continue
            openai_client = OpenAIRecipeClient.create(
                settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
            )
            generators.append(
                OpenAIMealPlanGenerator(
                    client=openai_client, model=settings.openai_model
                )
            )
            closers.append(openai_client.close)
        else:
            _logger.warning("Unknown meal plan generator %r ignored", name)
    return generators, closers


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    generators, closers = build_generators(resolved_settings)
    meal_plan_service = MealPlanService(
        pantry_repository=SupabasePantryRepository(supabase_client),
        recipe_repository=SupabaseRecipeRepository(supabase_client),
        generator_chain=GeneratorChain(generators),
    )

    async def close_resources() -> None:
        for close in closers:
            await close()

    return AppContainer(
        settings=resolved_settings,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
