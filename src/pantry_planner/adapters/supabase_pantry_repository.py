"""Supabase repository for pantry items."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from supabase import Client

from pantry_planner.domain.pantry import FoodRef, PantryEntry
from pantry_planner.services.meal_plans import PantryRepository


@dataclass
class SupabasePantryRepository(PantryRepository):
    """Supabase implementation for reading a user's pantry."""

    client: Client

    def list_pantry(self, user_id: UUID) -> list[PantryEntry]:
        """Return pantry entries with their foods."""
        response = (
            self.client.table("pantry_items")
            .select("id, quantity, unit, food:foods(id, name)")
            .eq("user_id", str(user_id))
            .order("id")
            .execute()
        )
        return [_parse_pantry_item(row) for row in response.data or []]


def parse_food(row: object) -> FoodRef:
    """Parse an embedded food row."""
    if not isinstance(row, dict) or "id" not in row:
        raise RuntimeError("Row is missing its food")
    return FoodRef(id=int(row["id"]), name=str(row.get("name") or ""))


def parse_quantity(value: object) -> Decimal:
    """Parse a numeric column into a Decimal."""
    if value is None:
        return Decimal(0)
    return Decimal(str(value))


def _parse_pantry_item(row: dict[str, object]) -> PantryEntry:
    return PantryEntry(
        food=parse_food(row.get("food")),
        quantity=parse_quantity(row.get("quantity")),
        unit=row.get("unit"),
    )
