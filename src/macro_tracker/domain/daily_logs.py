"""Domain models for daily logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from macro_tracker.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class MealEntry:
    """A meal eaten at a given time, with the macros it contributed."""

    meal_id: UUID
    time: str
    servings: float
    protein: float
    carbs: float
    fat: float
    calories: float

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
        )


@dataclass(frozen=True)
class DailyLog:
    """Meals logged by a user on one date, with cached totals."""

    id: UUID
    user_id: UUID
    date: date
    meal_entries: list[MealEntry]
    total_protein: float
    total_carbs: float
    total_fat: float
    total_calories: float

    @property
    def totals(self) -> MacroProfile:
        return MacroProfile(
            protein=self.total_protein,
            carbs=self.total_carbs,
            fat=self.total_fat,
            calories=self.total_calories,
        )


@dataclass(frozen=True)
class DailyTotals:
    """Totals for a single day, zero when nothing was logged."""

    day: date
    protein: float
    carbs: float
    fat: float
    calories: float
