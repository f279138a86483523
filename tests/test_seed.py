"""Tests for demo data seeding."""

from datetime import date

from fastapi.testclient import TestClient

from macro_tracker.api.app import create_app
from macro_tracker.containers import build_container
from macro_tracker.seed import DEMO_PASSWORD, DEMO_USERNAME, seed_demo_data


def test_seed_demo_data(container) -> None:
    day = date(2024, 5, 20)

    user = seed_demo_data(container, today=day)

    goals = container.goal_service.get_goals(user.id)
    assert goals is not None
    assert (goals.protein_goal, goals.carbs_goal, goals.fat_goal) == (160, 240, 53)
    assert len(container.meal_service.list_favorites(user.id)) == 4
    log = container.daily_log_service.get_log(user.id, day)
    assert log is not None
    assert len(log.meal_entries) == 3
    assert (
        log.total_protein,
        log.total_carbs,
        log.total_fat,
        log.total_calories,
    ) == (75, 80, 22, 818)


def test_seed_demo_data_is_idempotent(container) -> None:
    first = seed_demo_data(container, today=date(2024, 5, 20))
    second = seed_demo_data(container, today=date(2024, 5, 20))

    assert first.id == second.id
    assert len(container.meal_service.list_meals(first.id)) == 4


def test_app_seeds_demo_user_when_enabled(settings) -> None:
    container = build_container(settings.model_copy(update={"seed_demo_data": True}))
    client = TestClient(create_app(container))

    response = client.post(
        "/api/login", json={"username": DEMO_USERNAME, "password": DEMO_PASSWORD}
    )

    assert response.status_code == 200
    assert len(client.get("/api/meals/favorites").json()) == 4


def test_seed_skips_existing_demo_user_with_other_password(container) -> None:
    existing = container.user_service.register(DEMO_USERNAME, "changed")

    user = seed_demo_data(container, today=date(2024, 5, 20))

    assert user.id == existing.id
    assert container.goal_service.get_goals(user.id) is None
    assert container.meal_service.list_meals(user.id) == []
