"""Domain models for scheduled workouts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ScheduledWorkout:
    """A workout a user has planned for a future time."""

    id: UUID
    user_id: UUID
    name: str
    scheduled_at: datetime
    template_id: UUID | None = None
    duration_minutes: int | None = None
