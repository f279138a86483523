"""Tests for goal service."""

from datetime import date
from uuid import uuid4

from macro_tracker.adapters.memory_repositories import (
    InMemoryDailyLogRepository,
    InMemoryGoalRepository,
)
from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.services.goals import GoalService


def _service() -> GoalService:
    return GoalService(
        repository=InMemoryGoalRepository(),
        log_repository=InMemoryDailyLogRepository(),
    )


def test_upsert_goals_creates_then_updates() -> None:
    service = _service()
    user_id = uuid4()

    goal, created = service.upsert_goals(user_id, 160, 240, 53)
    assert created is True
    assert goal.calories_goal == 4 * 160 + 4 * 240 + 9 * 53

    updated, created_again = service.upsert_goals(user_id, 150, 200, 60)
    assert created_again is False
    assert updated.id == goal.id
    assert updated.protein_goal == 150
    assert service.get_goals(user_id) == updated


def test_get_progress_without_goals_returns_none() -> None:
    assert _service().get_progress(uuid4(), date(2024, 5, 20)) is None


def test_get_progress_compares_log_totals_with_goals() -> None:
    service = _service()
    user_id = uuid4()
    day = date(2024, 5, 20)
    service.upsert_goals(user_id, 100, 200, 50)
    service.log_repository.create_log(
        user_id, day, [], MacroProfile(protein=75, carbs=250, fat=0, calories=1300)
    )

    progress = service.get_progress(user_id, day)

    assert progress is not None
    assert progress.protein.consumed == 75
    assert progress.protein.remaining == 25
    assert progress.protein.percent == 75
    assert progress.carbs.remaining == 0
    assert progress.carbs.percent == 100
    assert progress.fat.percent == 0
    assert progress.calories.goal == 1650


def test_get_progress_without_log_counts_zero() -> None:
    service = _service()
    user_id = uuid4()
    service.upsert_goals(user_id, 100, 0, 50)

    progress = service.get_progress(user_id, date(2024, 5, 20))

    assert progress is not None
    assert progress.protein.consumed == 0
    assert progress.protein.remaining == 100
    assert progress.carbs.percent == 0


def test_progress_percent_is_rounded_and_capped() -> None:
    service = _service()
    user_id = uuid4()
    day = date(2024, 5, 20)
    service.upsert_goals(user_id, 160, 240, 53)
    service.log_repository.create_log(
        user_id, day, [], MacroProfile(protein=75, carbs=480, fat=22, calories=818)
    )

    progress = service.get_progress(user_id, day)

    assert progress is not None
    assert progress.protein.percent == 47
    assert progress.carbs.percent == 100
    assert progress.carbs.remaining == 0
    assert progress.fat.percent == 42
