"""Tests for meal plan generation."""

import asyncio
from datetime import date
from uuid import UUID

import httpx
import pytest

from pantry_planner.services.generators import GeneratorChain
from pantry_planner.services.meal_plans import (
    MealPlanDataError,
    MealPlanRequestError,
    MealPlanService,
)
from tests.conftest import (
    BlockingGenerator,
    FakeGenerator,
    InMemoryPantryRepository,
    InMemoryRecipeRepository,
    generated,
    pantry_entry,
    recipe,
)


def test_covered_recipe_fills_plan_without_external_calls(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    pantry_repository.entries[user_id] = [pantry_entry("Egg", 2)]
    recipe_repository.recipes[user_id] = [recipe(1, ("Egg", 1), user_id=user_id)]

    draft = asyncio.run(meal_plan_service.generate_meal_plan(1, user_id))

    assert draft.recipe_ids == [1]
    assert generator.requests == []


def test_empty_pantry_falls_back_to_generator(
    meal_plan_service: MealPlanService,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    recipe_repository.recipes[user_id] = [recipe(1, ("Egg", 1), user_id=user_id)]
    generator.entries = [generated("X")]

    draft = asyncio.run(meal_plan_service.generate_meal_plan(2, user_id))

    assert [meal.title for meal in draft.meals] == ["X"]
    assert generator.requests[0][0] == 2


def test_first_generator_fault_is_not_surfaced(
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    user_id: UUID,
) -> None:
    failing = FakeGenerator(name="broken", error=httpx.ConnectError("offline"))
    working = FakeGenerator(entries=[generated("A"), generated("B")])
    service = MealPlanService(
        pantry_repository=pantry_repository,
        recipe_repository=recipe_repository,
        generator_chain=GeneratorChain([failing, working]),
    )

    draft = asyncio.run(service.generate_meal_plan(2, user_id))

    assert [meal.title for meal in draft.meals] == ["A", "B"]


def test_zero_meals_touches_nothing(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    draft = asyncio.run(meal_plan_service.generate_meal_plan(0, user_id))

    assert len(draft) == 0
    assert pantry_repository.calls == 0
    assert recipe_repository.calls == 0
    assert generator.requests == []


def test_negative_count_rejected_before_loading(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    user_id: UUID,
) -> None:
    with pytest.raises(MealPlanRequestError):
        asyncio.run(meal_plan_service.generate_meal_plan(-1, user_id))

    assert pantry_repository.calls == 0
    assert recipe_repository.calls == 0


def test_large_request_is_not_capped(
    meal_plan_service: MealPlanService,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    generator.entries = [generated(f"Meal {number}") for number in range(20)]

    draft = asyncio.run(meal_plan_service.generate_meal_plan(15, user_id))

    assert len(draft) == 15
    assert generator.requests[0][0] == 15


def test_external_only_skips_local_recipes(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    pantry_repository.entries[user_id] = [pantry_entry("Egg", 2)]
    recipe_repository.recipes[user_id] = [recipe(1, ("Egg", 1), user_id=user_id)]
    generator.entries = [generated("Shakshuka")]

    draft = asyncio.run(
        meal_plan_service.generate_meal_plan(1, user_id, force_external_only=True)
    )

    assert draft.recipe_ids == []
    assert [meal.title for meal in draft.meals] == ["Shakshuka"]
    assert recipe_repository.calls == 0
    assert generator.requests[0][1] == (pantry_entry("Egg", 2),)


def test_local_entries_come_before_external(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    pantry_repository.entries[user_id] = [pantry_entry("Egg", 2)]
    recipe_repository.recipes[user_id] = [recipe(1, ("Egg", 1), user_id=user_id)]
    generator.entries = [generated("A"), generated("B"), generated("C")]

    draft = asyncio.run(
        meal_plan_service.generate_meal_plan(3, user_id, start_date=date(2026, 1, 5))
    )

    assert [meal.kind for meal in draft.meals] == ["recipe", "generated", "generated"]
    assert generator.requests[0][0] == 2
    assert len(draft) == 3
    assert draft.start_date == date(2026, 1, 5)
    assert pantry_repository.calls == 1


def test_plan_never_exceeds_request(
    meal_plan_service: MealPlanService,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    generator.entries = [generated(str(index)) for index in range(5)]

    draft = asyncio.run(meal_plan_service.generate_meal_plan(2, user_id))

    assert len(draft) == 2


def test_loader_failure_is_fatal(
    meal_plan_service: MealPlanService,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    recipe_repository.error = RuntimeError("database down")

    with pytest.raises(MealPlanDataError) as exc_info:
        asyncio.run(meal_plan_service.generate_meal_plan(1, user_id))

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert generator.requests == []


def test_cancellation_surfaces_to_caller(
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    user_id: UUID,
) -> None:
    blocking = BlockingGenerator()
    service = MealPlanService(
        pantry_repository=pantry_repository,
        recipe_repository=recipe_repository,
        generator_chain=GeneratorChain([blocking]),
    )

    async def scenario() -> None:
        task = asyncio.create_task(service.generate_meal_plan(1, user_id))
        await blocking.started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())


def test_generators_see_full_pantry_after_local_selection(
    meal_plan_service: MealPlanService,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    generator: FakeGenerator,
    user_id: UUID,
) -> None:
    pantry_repository.entries[user_id] = [pantry_entry("Egg", 2)]
    recipe_repository.recipes[user_id] = [recipe(1, ("Egg", 1), user_id=user_id)]
    generator.entries = [generated("Frittata")]

    draft = asyncio.run(meal_plan_service.generate_meal_plan(2, user_id))

    assert draft.recipe_ids == [1]
    assert generator.requests[0] == (1, (pantry_entry("Egg", 2),))
