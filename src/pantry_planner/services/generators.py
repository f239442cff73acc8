"""External meal generators and the fallback chain that queries them."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from pantry_planner.domain.meal_plans import GeneratedMealEntry
from pantry_planner.domain.pantry import PantryEntry

_logger = logging.getLogger(__name__)


class MealPlanGenerator(Protocol):
    """Source of meal suggestions outside the user's own recipes."""

    name: str

    async def generate(
        self, count: int, pantry: Sequence[PantryEntry]
    ) -> list[GeneratedMealEntry]:
        """Return up to ``count`` meals, preferably using the pantry."""


@dataclass
class GeneratorChain:
    """Priority-ordered generators queried until the deficit is filled."""

    generators: list[MealPlanGenerator] = field(default_factory=list)

    async def fill_remaining(
        self, deficit: int, pantry: Sequence[PantryEntry]
    ) -> list[GeneratedMealEntry]:
        """Collect up to ``deficit`` meals from the generators in order.

        A generator that raises, or returns something that is not a
        sequence of entries, is logged and counted as returning nothing.
        Cancellation is not caught and aborts the whole chain.
        """
        collected: list[GeneratedMealEntry] = []
        for generator in self.generators:
            needed = deficit - len(collected)
            if needed <= 0:
                break
            try:
                entries = list(await generator.generate(needed, pantry))
            except Exception:
                _logger.warning(
                    "Meal generator %s failed; continuing without it",
                    generator.name,
                    exc_info=True,
                )
                continue
            _logger.info(
                "Meal generator %s returned %s of %s requested",
                generator.name,
                len(entries),
                needed,
            )
            collected.extend(entries[:needed])
        return collected
