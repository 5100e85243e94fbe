"""Supabase repository for goals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.goals import Goal, GoalStatus, GoalType
from fitness_tracker.services.goals import GoalRepository

_COLUMNS = (
    "id, user_id, type, title, description, target_value, current_value, unit, "
    "target_date, status, created_at"
)


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def list_goals(self, user_id: UUID, status: GoalStatus | None) -> list[Goal]:
        """Return the user's goals, nearest target date first."""
        query = self.client.table("goals").select(_COLUMNS).eq("user_id", str(user_id))
        if status is not None:
            query = query.eq("status", status.value)
        response = query.order("target_date", desc=False).execute()
        return [_parse_goal(row) for row in response.data or []]

    def get_goal(self, goal_id: UUID) -> Goal | None:
        """Return a goal by id."""
        response = (
            self.client.table("goals")
            .select(_COLUMNS)
            .eq("id", str(goal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def create_goal(self, goal: Goal) -> Goal:
        """Insert a goal row."""
        response = self.client.table("goals").insert(_serialize_goal(goal)).execute()
        if not response.data:
            raise RuntimeError("Failed to create goal")
        return _parse_goal(response.data[0])

    def save_goal(self, goal: Goal) -> Goal:
        """Update progress and status of a goal row."""
        response = (
            self.client.table("goals")
            .update(
                {
                    "current_value": goal.current_value,
                    "status": goal.status.value,
                }
            )
            .eq("id", str(goal.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update goal")
        return _parse_goal(response.data[0])

    def delete_goal(self, goal_id: UUID) -> None:
        """Delete a goal row."""
        self.client.table("goals").delete().eq("id", str(goal_id)).execute()


def _serialize_goal(goal: Goal) -> dict[str, object]:
    return {
        "id": str(goal.id),
        "user_id": str(goal.user_id),
        "type": goal.type.value,
        "title": goal.title,
        "description": goal.description,
        "target_value": goal.target_value,
        "current_value": goal.current_value,
        "unit": goal.unit,
        "target_date": goal.target_date.isoformat(),
        "status": goal.status.value,
        "created_at": goal.created_at.isoformat() if goal.created_at else None,
    }


def _parse_goal(row: dict[str, object]) -> Goal:
    created_at_raw = row.get("created_at")
    return Goal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        type=GoalType(str(row["type"])),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        target_value=float(row.get("target_value") or 0.0),
        current_value=float(row.get("current_value") or 0.0),
        unit=str(row.get("unit") or ""),
        target_date=date.fromisoformat(str(row["target_date"])[:10]),
        status=GoalStatus(str(row.get("status") or GoalStatus.ACTIVE)),
        created_at=datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else None,
    )
