"""Tests for daily log and stats endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient


def _create_meal(client: TestClient, **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Oatmeal with fruit and yogurt",
        "protein": 15,
        "carbs": 45,
        "fat": 8,
        "calories": 312,
        "meal_type": "Breakfast",
    }
    payload.update(overrides)
    return client.post("/api/meals", json=payload).json()


def _entry(meal_id: object, **macros: float) -> dict[str, object]:
    return {"mealId": meal_id, "time": "08:30", "servings": 1, **macros}


def test_upsert_log_recomputes_totals(auth_client: TestClient) -> None:
    meal = _create_meal(auth_client)

    created = auth_client.post(
        "/api/daily-logs",
        json={
            "date": "2024-05-20",
            "mealEntries": [
                _entry(meal["id"], protein=15, carbs=45, fat=8, calories=312),
                _entry(meal["id"], protein=35, carbs=20, fat=12, calories=328),
            ],
            "totalProtein": 9999,
        },
    )

    assert created.status_code == 201
    log = created.json()
    assert log["total_protein"] == 50
    assert log["total_calories"] == 640

    updated = auth_client.post(
        "/api/daily-logs", json={"date": "2024-05-20", "mealEntries": []}
    )
    assert updated.status_code == 200
    assert updated.json()["id"] == log["id"]
    assert updated.json()["total_calories"] == 0


def test_upsert_log_requires_meal_id(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/daily-logs",
        json={"date": "2024-05-20", "mealEntries": [{"time": "08:00"}]},
    )

    assert response.status_code == 400


def test_get_log_by_date_and_range(auth_client: TestClient) -> None:
    auth_client.post("/api/daily-logs", json={"date": "2024-05-22", "mealEntries": []})
    auth_client.post("/api/daily-logs", json={"date": "2024-05-20", "mealEntries": []})

    single = auth_client.get("/api/daily-logs", params={"date": "2024-05-20"})
    assert single.json()["date"] == "2024-05-20"

    missing = auth_client.get("/api/daily-logs", params={"date": "2024-05-21"})
    assert missing.status_code == 200
    assert missing.json() is None

    ranged = auth_client.get(
        "/api/daily-logs",
        params={"startDate": "2024-05-19", "endDate": "2024-05-31"},
    )
    assert [log["date"] for log in ranged.json()] == ["2024-05-20", "2024-05-22"]

    assert auth_client.get("/api/daily-logs").status_code == 400


def test_add_and_remove_meal(auth_client: TestClient) -> None:
    meal = _create_meal(auth_client)
    log = auth_client.post(
        "/api/daily-logs", json={"date": "2024-05-20", "mealEntries": []}
    ).json()

    added = auth_client.post(
        f"/api/daily-logs/{log['id']}/add-meal",
        json=_entry(meal["id"], protein=25, carbs=15, fat=2, calories=178),
    )
    assert added.status_code == 200
    assert added.json()["total_protein"] == 25
    assert len(added.json()["meal_entries"]) == 1

    missing_id = auth_client.post(
        f"/api/daily-logs/{log['id']}/add-meal", json={"time": "09:00"}
    )
    assert missing_id.status_code == 400

    out_of_range = auth_client.post(f"/api/daily-logs/{log['id']}/remove-meal/3")
    assert out_of_range.status_code == 404
    negative = auth_client.post(f"/api/daily-logs/{log['id']}/remove-meal/-1")
    assert negative.status_code == 404

    removed = auth_client.post(f"/api/daily-logs/{log['id']}/remove-meal/0")
    assert removed.status_code == 200
    assert removed.json()["meal_entries"] == []
    assert removed.json()["total_protein"] == 0


def test_add_meal_to_unknown_log(auth_client: TestClient) -> None:
    response = auth_client.post(
        f"/api/daily-logs/{uuid4()}/add-meal", json=_entry(str(uuid4()))
    )

    assert response.status_code == 404


def test_log_meal_scales_servings(auth_client: TestClient) -> None:
    meal = _create_meal(auth_client, protein=25, carbs=15, fat=2, calories=178)

    response = auth_client.post(
        "/api/daily-logs/log-meal",
        json={
            "mealId": meal["id"],
            "date": "2024-05-20",
            "time": "16:30",
            "servings": 1.5,
        },
    )

    assert response.status_code == 200
    log = response.json()
    assert log["total_protein"] == 37.5
    assert log["total_calories"] == 267
    assert log["meal_entries"][0]["servings"] == 1.5

    unknown = auth_client.post(
        "/api/daily-logs/log-meal",
        json={"mealId": str(uuid4()), "date": "2024-05-20", "time": "17:00"},
    )
    assert unknown.status_code == 404


def test_weekly_stats(auth_client: TestClient) -> None:
    meal = _create_meal(auth_client)
    auth_client.post(
        "/api/daily-logs/log-meal",
        json={"mealId": meal["id"], "date": "2024-05-20", "time": "08:30"},
    )

    response = auth_client.get("/api/stats/weekly", params={"endDate": "2024-05-20"})

    assert response.status_code == 200
    summary = response.json()
    assert summary["start"] == "2024-05-14"
    assert len(summary["daily"]) == 7
    assert summary["daily"][-1]["protein"] == 15
    assert summary["avg_protein"] == 15
