"""Read-only access to scheduled workouts."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import ForbiddenError, WorkoutNotFoundError
from fitness_tracker.domain.workouts import ScheduledWorkout


class ScheduledWorkoutRepository(Protocol):
    """Persistence interface for scheduled workouts."""

    def list_upcoming(
        self, user_id: UUID, after: datetime, limit: int
    ) -> list[ScheduledWorkout]:
        """Return workouts scheduled at or after `after`, soonest first."""

    def get_scheduled(self, workout_id: UUID) -> ScheduledWorkout | None:
        """Return a scheduled workout by id, if present."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class WorkoutService:
    """Service for the upcoming-workouts dashboard widget."""

    repository: ScheduledWorkoutRepository
    clock: Callable[[], datetime] = field(default=_utcnow)

    def list_upcoming(self, user_id: UUID, limit: int = 5) -> list[ScheduledWorkout]:
        """Return the user's next scheduled workouts."""
        return self.repository.list_upcoming(user_id, self.clock(), max(limit, 0))

    def get_scheduled(self, workout_id: UUID, user_id: UUID) -> ScheduledWorkout:
        workout = self.repository.get_scheduled(workout_id)
        if workout is None:
            raise WorkoutNotFoundError()
        if workout.user_id != user_id:
            raise ForbiddenError("Not authorized to access this workout")
        return workout
