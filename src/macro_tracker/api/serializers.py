"""JSON serialization for domain objects."""

from dataclasses import asdict

from macro_tracker.domain.ai_meals import AIMealRequest
from macro_tracker.domain.daily_logs import DailyLog, MealEntry
from macro_tracker.domain.meals import Meal
from macro_tracker.domain.models import UserGoal, UserRecord
from macro_tracker.services.goals import GoalProgress
from macro_tracker.services.stats import PeriodSummary


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "username": user.username}


def serialize_goal(goal: UserGoal) -> dict[str, object]:
    return {
        "id": str(goal.id),
        "user_id": str(goal.user_id),
        "protein_goal": goal.protein_goal,
        "carbs_goal": goal.carbs_goal,
        "fat_goal": goal.fat_goal,
        "calories_goal": goal.calories_goal,
    }


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "name": meal.name,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "calories": meal.calories,
        "meal_type": meal.meal_type,
        "is_ai_generated": meal.is_ai_generated,
        "is_favorite": meal.is_favorite,
        "image_url": meal.image_url,
        "created_at": meal.created_at.isoformat() if meal.created_at else None,
    }


def serialize_entry(entry: MealEntry) -> dict[str, object]:
    return {
        "meal_id": str(entry.meal_id),
        "time": entry.time,
        "servings": entry.servings,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "calories": entry.calories,
    }


def serialize_log(log: DailyLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "user_id": str(log.user_id),
        "date": log.date.isoformat(),
        "meal_entries": [serialize_entry(entry) for entry in log.meal_entries],
        "total_protein": log.total_protein,
        "total_carbs": log.total_carbs,
        "total_fat": log.total_fat,
        "total_calories": log.total_calories,
    }


def serialize_ai_request(request: AIMealRequest) -> dict[str, object]:
    return {
        "id": str(request.id),
        "user_id": str(request.user_id),
        "prompt": request.prompt,
        "result": request.result.model_dump() if request.result else None,
        "saved": request.saved,
        "source": request.source,
        "created_at": request.created_at.isoformat() if request.created_at else None,
    }


def serialize_progress(progress: GoalProgress) -> dict[str, object]:
    data = asdict(progress)
    data["day"] = progress.day.isoformat()
    return data


def serialize_period(summary: PeriodSummary) -> dict[str, object]:
    return {
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "daily": [
            {
                "day": day.day.isoformat(),
                "protein": day.protein,
                "carbs": day.carbs,
                "fat": day.fat,
                "calories": day.calories,
            }
            for day in summary.daily
        ],
        "avg_protein": summary.avg_protein,
        "avg_carbs": summary.avg_carbs,
        "avg_fat": summary.avg_fat,
        "avg_calories": summary.avg_calories,
    }
