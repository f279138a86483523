"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from macro_tracker.adapters.memory_repositories import (
    InMemoryAIMealRequestRepository,
    InMemoryMealRepository,
)
from macro_tracker.api.app import create_app
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer, build_container
from macro_tracker.services.ai_meals import AIMealService, MealSuggestionClient
from macro_tracker.services.meals import MealService


@dataclass
class FakeMealClient(MealSuggestionClient):
    """Fake provider returning a fixed payload and recording prompts."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Salmon bowl",
            "description": "Salmon with rice and greens",
            "ingredients": ["Salmon", "Rice", "Spinach"],
            "protein": 40,
            "carbs": 55,
            "fat": 18,
            "calories": 542,
            "mealType": "Dinner",
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FailingMealClient(MealSuggestionClient):
    """Fake provider that always raises."""

    calls: int = 0

    async def generate(self, prompt: str) -> dict[str, object]:
        self.calls += 1
        raise RuntimeError("quota exceeded")


def build_ai_service(
    providers: list[tuple[str, MealSuggestionClient]], seed: int = 7
) -> AIMealService:
    return AIMealService(
        repository=InMemoryAIMealRequestRepository(),
        meal_service=MealService(InMemoryMealRepository()),
        providers=providers,
        rng=random.Random(seed),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        session_secret="test-secret",
        environment="test",
        storage_backend="memory",
        openai_api_key=None,
        gemini_api_key=None,
        seed_demo_data=False,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_client(client: TestClient) -> TestClient:
    response = client.post(
        "/api/register", json={"username": "alice", "password": "secret"}
    )
    assert response.status_code == 201
    return client
