"""Meal catalogue service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.meals import Meal
from macro_tracker.domain.nutrition import estimate_calories

DEFAULT_MEAL_TYPE = "Meal"

_PROTECTED_FIELDS = {"id", "user_id", "created_at"}


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return all meals for a user."""

    def list_favorites(self, user_id: UUID) -> list[Meal]:
        """Return the user's favorite meals."""

    def search_meals(self, user_id: UUID, query: str) -> list[Meal]:
        """Return meals whose name contains the query, ignoring case."""

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> Meal | None:
        """Apply changes to a meal and return it."""

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal, returning whether it existed."""


@dataclass
class MealService:
    """Application service for a user's meals."""

    repository: MealRepository

    def list_meals(self, user_id: UUID, query: str | None = None) -> list[Meal]:
        """List meals, filtered by name when a query is given."""
        if query:
            return self.repository.search_meals(user_id, query)
        return self.repository.list_meals(user_id)

    def list_favorites(self, user_id: UUID) -> list[Meal]:
        """List favorite meals."""
        return self.repository.list_favorites(user_id)

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        """Return a meal owned by the user."""
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal, estimating calories when none were given."""
        data = {
            key: value for key, value in payload.items() if key not in _PROTECTED_FIELDS
        }
        if data.get("calories") is None:
            data["calories"] = estimate_calories(
                float(data.get("protein", 0.0)),
                float(data.get("carbs", 0.0)),
                float(data.get("fat", 0.0)),
            )
        data["meal_type"] = data.get("meal_type") or DEFAULT_MEAL_TYPE
        data.setdefault("is_ai_generated", False)
        data.setdefault("is_favorite", False)
        return self.repository.create_meal(user_id, data)

    def update_meal(
        self, user_id: UUID, meal_id: UUID, changes: dict[str, object]
    ) -> Meal | None:
        """Partially update a meal owned by the user."""
        if self.get_meal(user_id, meal_id) is None:
            return None
        allowed = {
            key: value for key, value in changes.items() if key not in _PROTECTED_FIELDS
        }
        return self.repository.update_meal(meal_id, allowed)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the user."""
        if self.get_meal(user_id, meal_id) is None:
            return False
        return self.repository.delete_meal(meal_id)

    def toggle_favorite(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        """Flip the favorite flag of a meal."""
        meal = self.get_meal(user_id, meal_id)
        if meal is None:
            return None
        return self.repository.update_meal(
            meal_id, {"is_favorite": not meal.is_favorite}
        )
