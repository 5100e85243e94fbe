"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import DuplicateLogError
from fitness_tracker.domain.goals import Goal, GoalStatus
from fitness_tracker.domain.nutrition import NutritionLog
from fitness_tracker.domain.profiles import Profile
from fitness_tracker.domain.workouts import ScheduledWorkout
from fitness_tracker.services.goals import GoalRepository, GoalService
from fitness_tracker.services.identity import IdentityProvider
from fitness_tracker.services.nutrition_logs import (
    NutritionLogRepository,
    NutritionLogService,
)
from fitness_tracker.services.nutrition_stats import (
    NutritionStatsRepository,
    NutritionStatsService,
)
from fitness_tracker.services.profiles import ProfileRepository, ProfileService
from fitness_tracker.services.workouts import (
    ScheduledWorkoutRepository,
    WorkoutService,
)

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
USER_ID = UUID("00000000-0000-0000-0000-000000000001")
OTHER_USER_ID = UUID("00000000-0000-0000-0000-000000000002")
USER_TOKEN = "user-token"
OTHER_TOKEN = "other-token"


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class InMemoryNutritionLogRepository(NutritionLogRepository, NutritionStatsRepository):
    """In-memory nutrition log store with a (user, day) unique constraint."""

    logs: dict[UUID, NutritionLog] = field(default_factory=dict)

    def list_logs(
        self,
        user_id: UUID,
        start_date: date | None,
        end_date: date | None,
        offset: int,
        limit: int,
    ) -> tuple[list[NutritionLog], int]:
        matched = sorted(
            self.list_logs_in_range(user_id, start_date, end_date),
            key=lambda log: log.date,
            reverse=True,
        )
        return matched[offset : offset + limit], len(matched)

    def list_logs_in_range(
        self, user_id: UUID, start_date: date | None, end_date: date | None
    ) -> list[NutritionLog]:
        return [
            log
            for log in self.logs.values()
            if log.user_id == user_id
            and (start_date is None or log.date >= start_date)
            and (end_date is None or log.date <= end_date)
        ]

    def get_log(self, log_id: UUID) -> NutritionLog | None:
        return self.logs.get(log_id)

    def find_log_for_day(self, user_id: UUID, day: date) -> NutritionLog | None:
        for log in self.logs.values():
            if log.user_id == user_id and log.date == day:
                return log
        return None

    def create_log(self, log: NutritionLog) -> NutritionLog:
        self._check_unique(log)
        self.logs[log.id] = log
        return log

    def save_log(self, log: NutritionLog) -> NutritionLog:
        self._check_unique(log)
        self.logs[log.id] = log
        return log

    def delete_log(self, log_id: UUID) -> None:
        self.logs.pop(log_id, None)

    def _check_unique(self, log: NutritionLog) -> None:
        for other in self.logs.values():
            if (
                other.id != log.id
                and other.user_id == log.user_id
                and other.date == log.date
            ):
                raise DuplicateLogError(str(log.date))


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goals: dict[UUID, Goal] = field(default_factory=dict)

    def list_goals(self, user_id: UUID, status: GoalStatus | None) -> list[Goal]:
        return sorted(
            (
                goal
                for goal in self.goals.values()
                if goal.user_id == user_id and (status is None or goal.status == status)
            ),
            key=lambda goal: goal.target_date,
        )

    def get_goal(self, goal_id: UUID) -> Goal | None:
        return self.goals.get(goal_id)

    def create_goal(self, goal: Goal) -> Goal:
        self.goals[goal.id] = goal
        return goal

    def save_goal(self, goal: Goal) -> Goal:
        self.goals[goal.id] = goal
        return goal

    def delete_goal(self, goal_id: UUID) -> None:
        self.goals.pop(goal_id, None)


@dataclass
class InMemoryScheduledWorkoutRepository(ScheduledWorkoutRepository):
    """In-memory scheduled workout repository for tests."""

    workouts: list[ScheduledWorkout] = field(default_factory=list)

    def list_upcoming(
        self, user_id: UUID, after: datetime, limit: int
    ) -> list[ScheduledWorkout]:
        upcoming = [
            workout
            for workout in self.workouts
            if workout.user_id == user_id and workout.scheduled_at >= after
        ]
        return sorted(upcoming, key=lambda workout: workout.scheduled_at)[:limit]

    def get_scheduled(self, workout_id: UUID) -> ScheduledWorkout | None:
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        return None


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def save_profile(self, profile: Profile) -> Profile:
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Maps fixed tokens to user ids."""

    tokens: dict[str, UUID] = field(
        default_factory=lambda: {USER_TOKEN: USER_ID, OTHER_TOKEN: OTHER_USER_ID}
    )

    def resolve_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


def make_workout(user_id: UUID, scheduled_at: datetime, name: str) -> ScheduledWorkout:
    return ScheduledWorkout(
        id=uuid4(), user_id=user_id, name=name, scheduled_at=scheduled_at
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def log_repository() -> InMemoryNutritionLogRepository:
    return InMemoryNutritionLogRepository()


@pytest.fixture
def workout_repository() -> InMemoryScheduledWorkoutRepository:
    return InMemoryScheduledWorkoutRepository()


@pytest.fixture
def container(
    settings: Settings,
    log_repository: InMemoryNutritionLogRepository,
    workout_repository: InMemoryScheduledWorkoutRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        identity_provider=FakeIdentityProvider(),
        nutrition_log_service=NutritionLogService(
            repository=log_repository, clock=fixed_clock
        ),
        nutrition_stats_service=NutritionStatsService(log_repository),
        goal_service=GoalService(InMemoryGoalRepository(), clock=fixed_clock),
        workout_service=WorkoutService(workout_repository, clock=fixed_clock),
        profile_service=ProfileService(InMemoryProfileRepository()),
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
