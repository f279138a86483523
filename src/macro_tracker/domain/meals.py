"""Domain models for saved meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from macro_tracker.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class Meal:
    """A meal a user can log, with per-serving macros."""

    id: UUID
    user_id: UUID
    name: str
    protein: float
    carbs: float
    fat: float
    calories: float
    meal_type: str
    is_ai_generated: bool = False
    is_favorite: bool = False
    image_url: str | None = None
    created_at: datetime | None = None

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
        )
