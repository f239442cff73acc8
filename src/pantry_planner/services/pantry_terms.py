"""Helpers for turning pantry contents into search terms."""

from collections.abc import Sequence

from pantry_planner.domain.pantry import PantryEntry


def pantry_food_names(pantry: Sequence[PantryEntry], limit: int | None = None) -> list[str]:
    """Return distinct pantry food names in pantry order."""
    names: list[str] = []
    seen: set[str] = set()
    for entry in pantry:
        key = entry.food.match_key
        if not key or key in seen:
            continue
        seen.add(key)
        names.append(entry.food.name.strip())
        if limit is not None and len(names) >= limit:
            break
    return names
