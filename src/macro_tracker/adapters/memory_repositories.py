"""In-memory repositories backed by process-wide dicts."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from macro_tracker.domain.ai_meals import AIMealRequest, AIMealResult
from macro_tracker.domain.daily_logs import DailyLog, MealEntry
from macro_tracker.domain.meals import Meal
from macro_tracker.domain.models import UserGoal, UserRecord
from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.services.ai_meals import AIMealRequestRepository
from macro_tracker.services.daily_logs import DailyLogRepository
from macro_tracker.services.goals import GoalRepository
from macro_tracker.services.meals import MealRepository
from macro_tracker.services.users import UserRepository

_MEAL_FIELDS = {
    "name",
    "protein",
    "carbs",
    "fat",
    "calories",
    "meal_type",
    "is_ai_generated",
    "is_favorite",
    "image_url",
}


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user storage."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username, password_hash=password_hash)
        self.users[user.id] = user
        return user


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal storage."""

    goals: dict[UUID, UserGoal] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> UserGoal | None:
        for goal in self.goals.values():
            if goal.user_id == user_id:
                return goal
        return None

    def create_goals(
        self, user_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal:
        goal = UserGoal(
            id=uuid4(),
            user_id=user_id,
            protein_goal=protein,
            carbs_goal=carbs,
            fat_goal=fat,
        )
        self.goals[goal.id] = goal
        return goal

    def update_goals(
        self, goal_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal | None:
        current = self.goals.get(goal_id)
        if current is None:
            return None
        updated = replace(
            current, protein_goal=protein, carbs_goal=carbs, fat_goal=fat
        )
        self.goals[goal_id] = updated
        return updated


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal storage."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def list_meals(self, user_id: UUID) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal.user_id == user_id]

    def list_favorites(self, user_id: UUID) -> list[Meal]:
        return [meal for meal in self.list_meals(user_id) if meal.is_favorite]

    def search_meals(self, user_id: UUID, query: str) -> list[Meal]:
        query_lower = query.lower()
        return [
            meal
            for meal in self.list_meals(user_id)
            if query_lower in meal.name.lower()
        ]

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        values = {key: payload[key] for key in _MEAL_FIELDS if key in payload}
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            created_at=datetime.now(tz=UTC),
            **values,
        )
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal_id: UUID, changes: dict[str, object]) -> Meal | None:
        current = self.meals.get(meal_id)
        if current is None:
            return None
        values = {key: changes[key] for key in _MEAL_FIELDS if key in changes}
        updated = replace(current, **values)
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID) -> bool:
        return self.meals.pop(meal_id, None) is not None


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log storage."""

    logs: dict[UUID, DailyLog] = field(default_factory=dict)

    def get_log(self, log_id: UUID) -> DailyLog | None:
        return self.logs.get(log_id)

    def get_log_by_date(self, user_id: UUID, day: date) -> DailyLog | None:
        for log in self.logs.values():
            if log.user_id == user_id and log.date == day:
                return log
        return None

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        return [
            log
            for log in self.logs.values()
            if log.user_id == user_id and start <= log.date <= end
        ]

    def create_log(
        self,
        user_id: UUID,
        day: date,
        entries: list[MealEntry],
        totals: MacroProfile,
    ) -> DailyLog:
        log = DailyLog(
            id=uuid4(),
            user_id=user_id,
            date=day,
            meal_entries=list(entries),
            total_protein=totals.protein,
            total_carbs=totals.carbs,
            total_fat=totals.fat,
            total_calories=totals.calories,
        )
        self.logs[log.id] = log
        return log

    def update_log(
        self, log_id: UUID, entries: list[MealEntry], totals: MacroProfile
    ) -> DailyLog | None:
        current = self.logs.get(log_id)
        if current is None:
            return None
        updated = replace(
            current,
            meal_entries=list(entries),
            total_protein=totals.protein,
            total_carbs=totals.carbs,
            total_fat=totals.fat,
            total_calories=totals.calories,
        )
        self.logs[log_id] = updated
        return updated


@dataclass
class InMemoryAIMealRequestRepository(AIMealRequestRepository):
    """In-memory AI meal request storage."""

    requests: dict[UUID, AIMealRequest] = field(default_factory=dict)

    def create_request(
        self,
        user_id: UUID,
        prompt: str,
        result: AIMealResult | None,
        source: str | None,
    ) -> AIMealRequest:
        request = AIMealRequest(
            id=uuid4(),
            user_id=user_id,
            prompt=prompt,
            result=result,
            source=source,
            created_at=datetime.now(tz=UTC),
        )
        self.requests[request.id] = request
        return request

    def get_request(self, request_id: UUID) -> AIMealRequest | None:
        return self.requests.get(request_id)

    def list_requests(self, user_id: UUID) -> list[AIMealRequest]:
        return [
            request for request in self.requests.values() if request.user_id == user_id
        ]

    def mark_saved(self, request_id: UUID) -> AIMealRequest | None:
        current = self.requests.get(request_id)
        if current is None:
            return None
        updated = replace(current, saved=True)
        self.requests[request_id] = updated
        return updated
