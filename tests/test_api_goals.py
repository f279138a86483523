"""Tests for goal endpoints."""

from fastapi.testclient import TestClient


def test_goals_missing_returns_404(auth_client: TestClient) -> None:
    response = auth_client.get("/api/user-goals")

    assert response.status_code == 404
    assert response.json() == {"message": "Goals not found"}
    assert auth_client.get("/api/user-goals/progress").status_code == 404


def test_save_goals_creates_then_updates(auth_client: TestClient) -> None:
    created = auth_client.post(
        "/api/user-goals", json={"proteinGoal": 160, "carbsGoal": 240, "fatGoal": 53}
    )

    assert created.status_code == 201
    assert created.json()["calories_goal"] == 4 * 160 + 4 * 240 + 9 * 53

    updated = auth_client.post(
        "/api/user-goals", json={"protein_goal": 150, "carbs_goal": 200, "fat_goal": 60}
    )

    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert auth_client.get("/api/user-goals").json()["protein_goal"] == 150


def test_negative_goal_is_rejected(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/user-goals", json={"proteinGoal": -1, "carbsGoal": 240, "fatGoal": 53}
    )

    assert response.status_code == 400


def test_goal_progress_for_date(auth_client: TestClient) -> None:
    auth_client.post(
        "/api/user-goals", json={"proteinGoal": 100, "carbsGoal": 200, "fatGoal": 50}
    )
    meal = auth_client.post(
        "/api/meals",
        json={
            "name": "Protein shake",
            "protein": 25,
            "carbs": 15,
            "fat": 2,
            "calories": 178,
            "mealType": "Snack",
        },
    ).json()
    auth_client.post(
        "/api/daily-logs/log-meal",
        json={"mealId": meal["id"], "date": "2024-05-20", "time": "16:30"},
    )

    response = auth_client.get(
        "/api/user-goals/progress", params={"date": "2024-05-20"}
    )

    assert response.status_code == 200
    progress = response.json()
    assert progress["day"] == "2024-05-20"
    assert progress["protein"] == {
        "consumed": 25,
        "goal": 100,
        "remaining": 75,
        "percent": 25,
    }
    assert progress["calories"]["goal"] == 1650
