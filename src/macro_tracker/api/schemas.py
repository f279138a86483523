"""Request models for the REST API.

Bodies accept both snake_case and camelCase field names.
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from macro_tracker.domain.ai_meals import MacroNeeds
from macro_tracker.domain.daily_logs import MealEntry


class ApiModel(BaseModel):
    """Base model accepting camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CredentialsRequest(ApiModel):
    """Username and password."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class GoalsRequest(ApiModel):
    """Daily macro targets in grams."""

    protein_goal: float = Field(ge=0)
    carbs_goal: float = Field(ge=0)
    fat_goal: float = Field(ge=0)


class MealCreateRequest(ApiModel):
    """A new meal."""

    name: str = Field(min_length=1)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    calories: float | None = Field(default=None, ge=0)
    meal_type: str = Field(min_length=1)
    is_ai_generated: bool = False
    is_favorite: bool = False
    image_url: str | None = None


class MealUpdateRequest(ApiModel):
    """Partial meal update; unset fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    calories: float | None = Field(default=None, ge=0)
    meal_type: str | None = Field(default=None, min_length=1)
    is_ai_generated: bool | None = None
    is_favorite: bool | None = None
    image_url: str | None = None


class MealEntryPayload(ApiModel):
    """A meal entry as sent by clients."""

    meal_id: UUID | None = None
    time: str = ""
    servings: float = Field(default=1.0, gt=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    calories: float = Field(default=0.0, ge=0)

    def to_domain(self) -> MealEntry:
        if self.meal_id is None:
            raise ValueError("meal_id is required")
        return MealEntry(
            meal_id=self.meal_id,
            time=self.time,
            servings=self.servings,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
        )


class DailyLogRequest(ApiModel):
    """Entries for a day; any totals sent by clients are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    date: date
    meal_entries: list[MealEntryPayload] = Field(default_factory=list)


class LogMealRequest(ApiModel):
    """Add a saved meal to a day's log."""

    meal_id: UUID
    date: date
    time: str
    servings: float = Field(default=1.0, gt=0)


class MacroNeedsPayload(ApiModel):
    """Target macros for a generated meal."""

    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)

    def to_domain(self) -> MacroNeeds:
        return MacroNeeds(protein=self.protein, carbs=self.carbs, fat=self.fat)


class AIMealCreateRequest(ApiModel):
    """A meal-generation request."""

    prompt: str = ""
    macro_needs: MacroNeedsPayload | None = None
