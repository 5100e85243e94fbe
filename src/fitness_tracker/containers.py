"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from fitness_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from fitness_tracker.adapters.supabase_nutrition_log_repository import (
    SupabaseNutritionLogRepository,
)
from fitness_tracker.adapters.supabase_nutrition_stats_repository import (
    SupabaseNutritionStatsRepository,
)
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseScheduledWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.goals import GoalService
from fitness_tracker.services.identity import IdentityProvider
from fitness_tracker.services.nutrition_logs import NutritionLogService
from fitness_tracker.services.nutrition_stats import NutritionStatsService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    nutrition_log_service: NutritionLogService
    nutrition_stats_service: NutritionStatsService
    goal_service: GoalService
    workout_service: WorkoutService
    profile_service: ProfileService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return AppContainer(
        settings=resolved_settings,
        identity_provider=SupabaseIdentityProvider(supabase_client),
        nutrition_log_service=NutritionLogService(
            repository=SupabaseNutritionLogRepository(supabase_client),
            local_timezone=resolved_settings.local_timezone,
        ),
        nutrition_stats_service=NutritionStatsService(
            SupabaseNutritionStatsRepository(supabase_client)
        ),
        goal_service=GoalService(SupabaseGoalRepository(supabase_client)),
        workout_service=WorkoutService(
            SupabaseScheduledWorkoutRepository(supabase_client)
        ),
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
    )
