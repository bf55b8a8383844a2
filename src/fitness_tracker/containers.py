"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_account_repository import (
    SupabaseAccountRepository,
)
from fitness_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from fitness_tracker.adapters.supabase_workout_plan_repository import (
    SupabaseWorkoutPlanRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.accounts import AccountService
from fitness_tracker.services.auth import PasswordHasher, TokenService
from fitness_tracker.services.food_logs import FoodLogService
from fitness_tracker.services.preferences import PreferencesService
from fitness_tracker.services.workouts import WorkoutPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    account_service: AccountService
    preferences_service: PreferencesService
    workout_plan_service: WorkoutPlanService
    food_log_service: FoodLogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    account_repository = SupabaseAccountRepository(supabase_client)
    workout_plan_repository = SupabaseWorkoutPlanRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)

    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        ttl_minutes=resolved_settings.access_token_ttl_minutes,
    )
    account_service = AccountService(
        repository=account_repository,
        hasher=PasswordHasher(rounds=resolved_settings.password_hash_rounds),
        tokens=token_service,
    )

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        account_service=account_service,
        preferences_service=PreferencesService(account_repository),
        workout_plan_service=WorkoutPlanService(workout_plan_repository),
        food_log_service=FoodLogService(food_log_repository),
    )
