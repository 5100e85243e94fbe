"""Goal lifecycle service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from fitness_tracker.domain.errors import (
    ForbiddenError,
    GoalNotFoundError,
    InvalidDataError,
)
from fitness_tracker.domain.goals import Goal, GoalInput, GoalStatus

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def list_goals(self, user_id: UUID, status: GoalStatus | None) -> list[Goal]:
        """Return the user's goals, optionally filtered by status."""

    def get_goal(self, goal_id: UUID) -> Goal | None:
        """Return a goal by id, if present."""

    def create_goal(self, goal: Goal) -> Goal:
        """Insert a goal and return it."""

    def save_goal(self, goal: Goal) -> Goal:
        """Overwrite a stored goal."""

    def delete_goal(self, goal_id: UUID) -> None:
        """Delete a goal."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class GoalService:
    """Creates goals and tracks their progress."""

    repository: GoalRepository
    clock: Callable[[], datetime] = field(default=_utcnow)

    def list_goals(self, user_id: UUID, status: GoalStatus | None = None) -> list[Goal]:
        return self.repository.list_goals(user_id, status)

    def get_goal(self, goal_id: UUID, user_id: UUID) -> Goal:
        return self._owned_goal(goal_id, user_id)

    def create_goal(self, user_id: UUID, payload: GoalInput) -> Goal:
        """Validate and persist a new active goal."""
        if payload.target_value <= 0:
            raise InvalidDataError("Target value must be greater than 0")
        if not payload.unit.strip():
            raise InvalidDataError("Unit is required")
        if payload.current_value < 0:
            raise InvalidDataError("Current value cannot be negative")
        if payload.current_value > payload.target_value:
            raise InvalidDataError("Current value cannot exceed target value")
        now = self.clock()
        if payload.target_date < now.astimezone(UTC).date():
            raise InvalidDataError("Target date cannot be in the past")

        goal = Goal(
            id=uuid4(),
            user_id=user_id,
            type=payload.type,
            title=payload.title or f"{payload.type.value.capitalize()} goal",
            description=payload.description,
            target_value=payload.target_value,
            current_value=payload.current_value,
            unit=payload.unit.strip(),
            target_date=payload.target_date,
            status=_status_for(payload.current_value, payload.target_value),
            created_at=now,
        )
        created = self.repository.create_goal(goal)
        _logger.info(
            "Goal created",
            extra={"user_id": str(user_id), "goal_id": str(created.id)},
        )
        return created

    def update_progress(
        self, goal_id: UUID, user_id: UUID, current_value: float
    ) -> Goal:
        """Record progress; reaching the target completes the goal."""
        goal = self._owned_goal(goal_id, user_id)
        if goal.status is not GoalStatus.ACTIVE:
            raise InvalidDataError(f"Goal is already {goal.status.value}")
        if current_value < 0:
            raise InvalidDataError("Current value cannot be negative")
        clamped = min(current_value, goal.target_value)
        return self.repository.save_goal(
            replace(
                goal,
                current_value=clamped,
                status=_status_for(clamped, goal.target_value),
            )
        )

    def abandon_goal(self, goal_id: UUID, user_id: UUID) -> Goal:
        goal = self._owned_goal(goal_id, user_id)
        if goal.status is not GoalStatus.ACTIVE:
            raise InvalidDataError(f"Goal is already {goal.status.value}")
        return self.repository.save_goal(replace(goal, status=GoalStatus.ABANDONED))

    def delete_goal(self, goal_id: UUID, user_id: UUID) -> None:
        goal = self._owned_goal(goal_id, user_id)
        self.repository.delete_goal(goal.id)

    def _owned_goal(self, goal_id: UUID, user_id: UUID) -> Goal:
        goal = self.repository.get_goal(goal_id)
        if goal is None:
            raise GoalNotFoundError()
        if goal.user_id != user_id:
            raise ForbiddenError("Not authorized to access this goal")
        return goal


def _status_for(current_value: float, target_value: float) -> GoalStatus:
    if current_value >= target_value:
        return GoalStatus.COMPLETED
    return GoalStatus.ACTIVE
