"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.gemini_client import HttpxGeminiClient
from macro_tracker.adapters.memory_repositories import (
    InMemoryAIMealRequestRepository,
    InMemoryDailyLogRepository,
    InMemoryGoalRepository,
    InMemoryMealRepository,
    InMemoryUserRepository,
)
from macro_tracker.adapters.openai_meal_client import OpenAIMealClient
from macro_tracker.adapters.supabase_ai_meal_repository import (
    SupabaseAIMealRequestRepository,
)
from macro_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from macro_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from macro_tracker.adapters.supabase_user_repository import (
    SupabaseGoalRepository,
    SupabaseUserRepository,
)
from macro_tracker.config import Settings, parse_storage_backend
from macro_tracker.services.ai_meals import (
    AIMealRequestRepository,
    AIMealService,
    MealSuggestionClient,
)
from macro_tracker.services.daily_logs import DailyLogRepository, DailyLogService
from macro_tracker.services.goals import GoalRepository, GoalService
from macro_tracker.services.meals import MealRepository, MealService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import UserRepository, UserService


@dataclass
class Repositories:
    """Storage backends used by the services."""

    users: UserRepository
    goals: GoalRepository
    meals: MealRepository
    daily_logs: DailyLogRepository
    ai_meal_requests: AIMealRequestRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    goal_service: GoalService
    meal_service: MealService
    daily_log_service: DailyLogService
    stats_service: StatsService
    ai_meal_service: AIMealService
    close_resources: Callable[[], Awaitable[None]]


def build_repositories(settings: Settings) -> Repositories:
    """Create repositories for the configured storage backend."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return Repositories(
            users=SupabaseUserRepository(client),
            goals=SupabaseGoalRepository(client),
            meals=SupabaseMealRepository(client),
            daily_logs=SupabaseDailyLogRepository(client),
            ai_meal_requests=SupabaseAIMealRequestRepository(client),
        )
    return Repositories(
        users=InMemoryUserRepository(),
        goals=InMemoryGoalRepository(),
        meals=InMemoryMealRepository(),
        daily_logs=InMemoryDailyLogRepository(),
        ai_meal_requests=InMemoryAIMealRequestRepository(),
    )


def build_container(
    settings: Settings | None = None, repositories: Repositories | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repos = repositories or build_repositories(resolved_settings)

    providers: list[tuple[str, MealSuggestionClient]] = []
    openai_client: OpenAIMealClient | None = None
    gemini_client: HttpxGeminiClient | None = None
    if resolved_settings.openai_api_key:
        openai_client = OpenAIMealClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
        )
        providers.append(("openai", openai_client))
    if resolved_settings.gemini_api_key:
        gemini_client = HttpxGeminiClient.create(
            api_key=resolved_settings.gemini_api_key,
            model=resolved_settings.gemini_model,
            base_url=resolved_settings.gemini_base_url,
        )
        providers.append(("gemini", gemini_client))

    user_service = UserService(repos.users)
    meal_service = MealService(repos.meals)
    daily_log_service = DailyLogService(
        repository=repos.daily_logs,
        meal_service=meal_service,
    )
    goal_service = GoalService(
        repository=repos.goals,
        log_repository=repos.daily_logs,
    )
    stats_service = StatsService(repos.daily_logs)
    ai_meal_service = AIMealService(
        repository=repos.ai_meal_requests,
        meal_service=meal_service,
        providers=providers,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()
        if gemini_client is not None:
            await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        goal_service=goal_service,
        meal_service=meal_service,
        daily_log_service=daily_log_service,
        stats_service=stats_service,
        ai_meal_service=ai_meal_service,
        close_resources=close_resources,
    )
