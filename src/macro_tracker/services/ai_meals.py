"""AI meal suggestion service.

Suggestions come from the first provider that returns a valid meal. When
every configured provider fails, a canned meal built from the request is
used instead, so a request always produces a result.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from pydantic import ValidationError

from macro_tracker.domain.ai_meals import AIMealRequest, AIMealResult, MacroNeeds
from macro_tracker.domain.meals import Meal
from macro_tracker.services.meals import DEFAULT_MEAL_TYPE, MealService

_logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "fallback"

SYSTEM_PROMPT = (
    "You are an expert chef and nutritionist. "
    "You create healthy recipes with their exact macronutrients."
)


class MealSuggestionClient(Protocol):
    """Interface for an LLM provider that suggests meals."""

    async def generate(self, prompt: str) -> dict[str, object]:
        """Return the provider's meal JSON for a prompt."""


class AIMealRequestRepository(Protocol):
    """Persistence interface for AI meal requests."""

    def create_request(
        self,
        user_id: UUID,
        prompt: str,
        result: AIMealResult | None,
        source: str | None,
    ) -> AIMealRequest:
        """Store a request with its result."""

    def get_request(self, request_id: UUID) -> AIMealRequest | None:
        """Return a request by id, if present."""

    def list_requests(self, user_id: UUID) -> list[AIMealRequest]:
        """Return the user's requests."""

    def mark_saved(self, request_id: UUID) -> AIMealRequest | None:
        """Flag a request as saved to the user's meals."""


@dataclass(frozen=True)
class _CannedMeal:
    keywords: tuple[str, ...]
    name: str
    description: str
    meal_type: str
    ingredients: tuple[str, ...]


_CANNED_MEALS = (
    _CannedMeal(
        keywords=("salad", "ensalada"),
        name="Mediterranean salad",
        description="A fresh salad with Mediterranean ingredients",
        meal_type="Lunch",
        ingredients=("Mixed greens", "Cherry tomatoes", "Feta cheese", "Olive oil"),
    ),
    _CannedMeal(
        keywords=("chicken", "pollo"),
        name="Grilled chicken with vegetables",
        description="Grilled chicken breast with sauteed vegetables",
        meal_type="Dinner",
        ingredients=("Chicken breast", "Zucchini", "Bell pepper", "Olive oil"),
    ),
    _CannedMeal(
        keywords=("breakfast", "desayuno"),
        name="Avocado toast with egg",
        description="Whole-grain toast with avocado and a poached egg",
        meal_type="Breakfast",
        ingredients=("Whole-grain bread", "Avocado", "Egg", "Lemon"),
    ),
)

_DEFAULT_CANNED_MEAL = _CannedMeal(
    keywords=(),
    name="Healthy meal",
    description="A healthy, balanced recipe",
    meal_type=DEFAULT_MEAL_TYPE,
    ingredients=("Lean protein", "Whole grains", "Vegetables", "Healthy fat"),
)


@dataclass
class AIMealService:
    """Service that generates, stores and saves AI meal suggestions."""

    repository: AIMealRequestRepository
    meal_service: MealService
    providers: list[tuple[str, MealSuggestionClient]] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)

    async def generate(
        self, user_id: UUID, prompt: str, macro_needs: MacroNeeds | None = None
    ) -> AIMealRequest:
        """Generate a meal for the prompt and store the request."""
        full_prompt = build_prompt(prompt, macro_needs)
        result, source = await self._suggest(full_prompt)
        if result is None:
            _logger.warning("All meal providers failed, using canned meal")
            result = fallback_meal(prompt, macro_needs, self.rng)
            source = FALLBACK_SOURCE
        return self.repository.create_request(
            user_id=user_id, prompt=prompt, result=result, source=source
        )

    def list_requests(self, user_id: UUID) -> list[AIMealRequest]:
        """Return the user's requests."""
        return self.repository.list_requests(user_id)

    def save_as_meal(self, user_id: UUID, request_id: UUID) -> Meal | None:
        """Turn a request's result into one of the user's meals."""
        request = self.repository.get_request(request_id)
        if (
            request is None
            or request.user_id != user_id
            or request.result is None
            or request.saved
        ):
            return None
        result = request.result
        meal = self.meal_service.create_meal(
            user_id,
            {
                "name": result.name,
                "protein": result.protein,
                "carbs": result.carbs,
                "fat": result.fat,
                "calories": result.calories,
                "meal_type": result.meal_type or DEFAULT_MEAL_TYPE,
                "is_ai_generated": True,
                "is_favorite": False,
                "image_url": None,
            },
        )
        self.repository.mark_saved(request_id)
        return meal

    async def _suggest(self, prompt: str) -> tuple[AIMealResult | None, str | None]:
        for name, client in self.providers:
            try:
                raw = await client.generate(prompt)
                return AIMealResult.model_validate(raw), name
            except ValidationError as exc:
                _logger.warning("Provider %s returned an invalid meal: %s", name, exc)
            except Exception:
                _logger.exception("Meal provider %s failed", name)
        return None, None


def build_prompt(prompt: str, macro_needs: MacroNeeds | None = None) -> str:
    """Build the provider prompt from the user's request."""
    parts = ["Create a healthy meal recipe"]
    if macro_needs is not None:
        parts.append(
            f" that contains approximately {macro_needs.protein:g}g of protein, "
            f"{macro_needs.carbs:g}g of carbohydrates and {macro_needs.fat:g}g of fat."
        )
    parts.append(
        f" {prompt.strip()}. Respond with a JSON object containing the fields: "
        "name (meal name), description (short description), "
        "ingredients (array of ingredients), protein (grams of protein), "
        "carbs (grams of carbohydrates), fat (grams of fat), "
        "calories (total calories), mealType (Breakfast, Lunch, Dinner or Snack)."
    )
    return "".join(parts)


def fallback_meal(
    prompt: str, macro_needs: MacroNeeds | None, rng: random.Random
) -> AIMealResult:
    """Build a placeholder meal from the request when no provider answered."""
    if macro_needs is not None:
        protein, carbs, fat = macro_needs.protein, macro_needs.carbs, macro_needs.fat
    else:
        protein = rng.randint(20, 49)
        carbs = rng.randint(30, 69)
        fat = rng.randint(10, 24)
    canned = _match_canned_meal(prompt)
    return AIMealResult(
        name=canned.name,
        description=canned.description,
        ingredients=list(canned.ingredients),
        protein=protein,
        carbs=carbs,
        fat=fat,
        calories=protein * 4 + carbs * 4 + fat * 9,
        meal_type=canned.meal_type,
    )


def _match_canned_meal(prompt: str) -> _CannedMeal:
    lowered = prompt.lower()
    for canned in _CANNED_MEALS:
        if any(keyword in lowered for keyword in canned.keywords):
            return canned
    return _DEFAULT_CANNED_MEAL
