"""Tests for meal endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

_MEAL = {
    "name": "Grilled chicken with salad",
    "protein": 35,
    "carbs": 20,
    "fat": 12,
    "calories": 328,
    "mealType": "Lunch",
}


def test_create_and_get_meal(auth_client: TestClient) -> None:
    created = auth_client.post("/api/meals", json=_MEAL)

    assert created.status_code == 201
    meal = created.json()
    assert meal["meal_type"] == "Lunch"
    assert meal["is_favorite"] is False
    assert auth_client.get(f"/api/meals/{meal['id']}").json() == meal


def test_create_meal_without_calories_estimates_them(auth_client: TestClient) -> None:
    payload = {key: value for key, value in _MEAL.items() if key != "calories"}

    meal = auth_client.post("/api/meals", json=payload).json()

    assert meal["calories"] == 328


def test_list_and_search_meals(auth_client: TestClient) -> None:
    auth_client.post("/api/meals", json=_MEAL)
    auth_client.post("/api/meals", json={**_MEAL, "name": "Protein shake"})

    assert len(auth_client.get("/api/meals").json()) == 2
    found = auth_client.get("/api/meals", params={"q": "SHAKE"}).json()
    assert [meal["name"] for meal in found] == ["Protein shake"]


def test_update_meal(auth_client: TestClient) -> None:
    meal = auth_client.post("/api/meals", json=_MEAL).json()

    response = auth_client.put(
        f"/api/meals/{meal['id']}", json={"protein": 40, "imageUrl": "https://x/y.jpg"}
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["protein"] == 40
    assert updated["image_url"] == "https://x/y.jpg"
    assert updated["name"] == meal["name"]
    assert updated["id"] == meal["id"]


def test_toggle_favorite_and_favorites(auth_client: TestClient) -> None:
    meal = auth_client.post("/api/meals", json=_MEAL).json()

    toggled = auth_client.post(f"/api/meals/{meal['id']}/toggle-favorite").json()

    assert toggled["is_favorite"] is True
    favorites = auth_client.get("/api/meals/favorites").json()
    assert [item["id"] for item in favorites] == [meal["id"]]


def test_delete_meal(auth_client: TestClient) -> None:
    meal = auth_client.post("/api/meals", json=_MEAL).json()

    assert auth_client.delete(f"/api/meals/{meal['id']}").status_code == 204
    assert auth_client.get(f"/api/meals/{meal['id']}").status_code == 404
    assert auth_client.delete(f"/api/meals/{meal['id']}").status_code == 404


def test_missing_meal_returns_404(auth_client: TestClient) -> None:
    response = auth_client.get(f"/api/meals/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Meal not found"}


def test_meals_are_scoped_to_owner(client: TestClient) -> None:
    client.post("/api/register", json={"username": "alice", "password": "pw"})
    meal = client.post("/api/meals", json=_MEAL).json()
    client.post("/api/logout")
    client.post("/api/register", json={"username": "bob", "password": "pw"})

    assert client.get(f"/api/meals/{meal['id']}").status_code == 404
    assert client.get("/api/meals").json() == []
