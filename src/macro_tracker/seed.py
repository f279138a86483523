"""Demo data for local development."""

import logging
from datetime import UTC, date, datetime

from macro_tracker.containers import AppContainer
from macro_tracker.domain.daily_logs import MealEntry
from macro_tracker.domain.models import UserRecord

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo"

_logger = logging.getLogger(__name__)

_DEMO_MEALS = (
    {
        "name": "Oatmeal with fruit and yogurt",
        "protein": 15,
        "carbs": 45,
        "fat": 8,
        "calories": 312,
        "meal_type": "Breakfast",
        "image_url": "https://images.unsplash.com/photo-1607532941433-304659e8198a",
    },
    {
        "name": "Grilled chicken with salad",
        "protein": 35,
        "carbs": 20,
        "fat": 12,
        "calories": 328,
        "meal_type": "Lunch",
        "image_url": "https://images.unsplash.com/photo-1598515214211-89d3c73ae83b",
    },
    {
        "name": "Protein shake",
        "protein": 25,
        "carbs": 15,
        "fat": 2,
        "calories": 178,
        "meal_type": "Snack",
        "image_url": "https://images.unsplash.com/photo-1565958011703-44f9829ba187",
    },
    {
        "name": "Mixed salad",
        "protein": 12,
        "carbs": 10,
        "fat": 5,
        "calories": 133,
        "meal_type": "Dinner",
        "image_url": "https://images.unsplash.com/photo-1546069901-ba9599a7e63c",
    },
)

_DEMO_TIMES = ("08:30", "13:00", "16:30")


def seed_demo_data(container: AppContainer, today: date | None = None) -> UserRecord:
    """Create the demo user with goals, favorite meals and today's log."""
    existing = container.user_service.get_by_username(DEMO_USERNAME)
    if existing is not None:
        _logger.info("Demo user already exists, skipping seed")
        return existing
    user = container.user_service.register(DEMO_USERNAME, DEMO_PASSWORD)
    container.goal_service.upsert_goals(user.id, protein=160, carbs=240, fat=53)
    meals = [
        container.meal_service.create_meal(user.id, {**payload, "is_favorite": True})
        for payload in _DEMO_MEALS
    ]
    entries = [
        MealEntry(
            meal_id=meal.id,
            time=time,
            servings=1,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
            calories=meal.calories,
        )
        for meal, time in zip(meals, _DEMO_TIMES, strict=False)
    ]
    day = today or datetime.now(tz=UTC).date()
    container.daily_log_service.upsert_log(user.id, day, entries)
    _logger.info("Seeded demo data for user %s", user.id)
    return user
