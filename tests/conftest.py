"""Shared test fixtures."""

import pytest

from daily_diet.config import Settings
from daily_diet.containers import AppContainer
from daily_diet.services.meals import MealService
from daily_diet.services.sessions import SessionManager
from daily_diet.services.users import UserService
from tests.fakes import InMemoryMealRepository, InMemoryUserRepository


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRepository,
    user_repository: InMemoryUserRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_manager=SessionManager(),
        meal_service=MealService(meal_repository),
        user_service=UserService(user_repository),
        close_resources=close_resources,
    )
