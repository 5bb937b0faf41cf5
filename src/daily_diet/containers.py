"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from daily_diet.adapters.supabase_meal_repository import SupabaseMealRepository
from daily_diet.adapters.supabase_user_repository import SupabaseUserRepository
from daily_diet.config import Settings
from daily_diet.services.meals import MealService
from daily_diet.services.sessions import SessionManager
from daily_diet.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_manager: SessionManager
    meal_service: MealService
    user_service: UserService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_service = MealService(SupabaseMealRepository(supabase_client))
    user_service = UserService(SupabaseUserRepository(supabase_client))

    async def close_resources() -> None:
        supabase_client.postgrest.aclose()

    return AppContainer(
        settings=resolved_settings,
        session_manager=SessionManager(),
        meal_service=meal_service,
        user_service=user_service,
        close_resources=close_resources,
    )
