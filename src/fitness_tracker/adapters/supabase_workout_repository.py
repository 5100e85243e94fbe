"""Supabase repository for scheduled workouts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.workouts import ScheduledWorkout
from fitness_tracker.services.workouts import ScheduledWorkoutRepository

_COLUMNS = "id, user_id, name, scheduled_at, template_id, duration_minutes"


@dataclass
class SupabaseScheduledWorkoutRepository(ScheduledWorkoutRepository):
    """Supabase implementation for scheduled workouts."""

    client: Client

    def list_upcoming(
        self, user_id: UUID, after: datetime, limit: int
    ) -> list[ScheduledWorkout]:
        """Return upcoming workouts for a user."""
        response = (
            self.client.table("scheduled_workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("scheduled_at", after.isoformat())
            .order("scheduled_at", desc=False)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_scheduled(self, workout_id: UUID) -> ScheduledWorkout | None:
        """Return a scheduled workout by id."""
        response = (
            self.client.table("scheduled_workouts")
            .select(_COLUMNS)
            .eq("id", str(workout_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> ScheduledWorkout:
    template_id = row.get("template_id")
    duration = row.get("duration_minutes")
    return ScheduledWorkout(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        scheduled_at=datetime.fromisoformat(str(row["scheduled_at"])),
        template_id=UUID(str(template_id)) if template_id else None,
        duration_minutes=int(duration) if isinstance(duration, int | float) else None,
    )
