"""Daily macro goals and progress against them."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import UserGoal
from macro_tracker.domain.nutrition import ZERO_MACROS
from macro_tracker.services.daily_logs import DailyLogRepository


class GoalRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goals(self, user_id: UUID) -> UserGoal | None:
        """Return the user's goals, if set."""

    def create_goals(
        self, user_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal:
        """Create goals for a user."""

    def update_goals(
        self, goal_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal | None:
        """Update an existing goal row."""


@dataclass(frozen=True)
class MacroProgress:
    """Consumption of one macro against its goal."""

    consumed: float
    goal: float
    remaining: float
    percent: int


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a day's log against the user's goals."""

    day: date
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
    calories: MacroProgress


@dataclass
class GoalService:
    """Service for reading and updating daily goals."""

    repository: GoalRepository
    log_repository: DailyLogRepository

    def get_goals(self, user_id: UUID) -> UserGoal | None:
        """Return the user's goals."""
        return self.repository.get_goals(user_id)

    def upsert_goals(
        self, user_id: UUID, protein: float, carbs: float, fat: float
    ) -> tuple[UserGoal, bool]:
        """Set goals for a user, returning them and whether they were created."""
        existing = self.repository.get_goals(user_id)
        if existing is not None:
            updated = self.repository.update_goals(existing.id, protein, carbs, fat)
            if updated is not None:
                return updated, False
        return self.repository.create_goals(user_id, protein, carbs, fat), True

    def get_progress(self, user_id: UUID, day: date) -> GoalProgress | None:
        """Compare the day's totals with the user's goals."""
        goals = self.repository.get_goals(user_id)
        if goals is None:
            return None
        log = self.log_repository.get_log_by_date(user_id, day)
        totals = log.totals if log is not None else ZERO_MACROS
        return GoalProgress(
            day=day,
            protein=_progress(totals.protein, goals.protein_goal),
            carbs=_progress(totals.carbs, goals.carbs_goal),
            fat=_progress(totals.fat, goals.fat_goal),
            calories=_progress(totals.calories, goals.calories_goal),
        )


def _progress(consumed: float, goal: float) -> MacroProgress:
    percent = min(round(consumed / goal * 100), 100) if goal > 0 else 0
    return MacroProgress(
        consumed=consumed,
        goal=goal,
        remaining=max(goal - consumed, 0.0),
        percent=percent,
    )
