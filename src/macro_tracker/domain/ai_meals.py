"""Models for AI-generated meal suggestions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field


class AIMealResult(BaseModel):
    """Normalized meal suggestion returned by any provider."""

    name: str = Field(min_length=1)
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    calories: float = Field(ge=0)
    meal_type: str = Field(
        default="", validation_alias=AliasChoices("meal_type", "mealType")
    )


@dataclass(frozen=True)
class MacroNeeds:
    """Target macros for a generated meal, in grams."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class AIMealRequest:
    """A stored meal-generation request and its result."""

    id: UUID
    user_id: UUID
    prompt: str
    result: AIMealResult | None
    saved: bool = False
    source: str | None = None
    created_at: datetime | None = None
