"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.meals import Meal
from macro_tracker.services.meals import MealRepository

_COLUMNS = (
    "id, user_id, name, protein, carbs, fat, calories, meal_type, "
    "is_ai_generated, is_favorite, image_url, created_at"
)

_WRITABLE = (
    "name",
    "protein",
    "carbs",
    "fat",
    "calories",
    "meal_type",
    "is_ai_generated",
    "is_favorite",
    "image_url",
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return all meals for a user."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_favorites(self, user_id: UUID) -> list[Meal]:
        """Return favorite meals for a user."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("is_favorite", True)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def search_meals(self, user_id: UUID, query: str) -> list[Meal]:
        """Return meals whose name contains the query."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .ilike("name", f"%{query}%")
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal row and return it."""
        row = {key: payload[key] for key in _WRITABLE if key in payload}
        row["user_id"] = str(user_id)
        response = self.client.table("meals").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> Meal | None:
        """Update a meal row and return it."""
        row = {key: changes[key] for key in _WRITABLE if key in changes}
        if not row:
            return self.get_meal(meal_id)
        response = (
            self.client.table("meals").update(row).eq("id", str(meal_id)).execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal row."""
        response = self.client.table("meals").delete().eq("id", str(meal_id)).execute()
        return bool(response.data)


def _parse_meal(row: dict[str, object]) -> Meal:
    created_at_raw = row.get("created_at")
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        calories=float(row.get("calories", 0.0)),
        meal_type=str(row.get("meal_type", "")),
        is_ai_generated=bool(row.get("is_ai_generated", False)),
        is_favorite=bool(row.get("is_favorite", False)),
        image_url=row.get("image_url"),
        created_at=(
            datetime.fromisoformat(created_at_raw)
            if isinstance(created_at_raw, str) and created_at_raw
            else None
        ),
    )
