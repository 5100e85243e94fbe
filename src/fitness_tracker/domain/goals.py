"""Domain models for goals."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class GoalType(StrEnum):
    """Kinds of goals a user can track."""

    WEIGHT = "weight"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    HABIT = "habit"
    NUTRITION = "nutrition"
    CUSTOM = "custom"


class GoalStatus(StrEnum):
    """Goal lifecycle states; completed and abandoned are terminal."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


DEFAULT_UNITS: dict[GoalType, str] = {
    GoalType.WEIGHT: "kg",
    GoalType.STRENGTH: "lbs",
    GoalType.ENDURANCE: "min",
    GoalType.HABIT: "sessions",
    GoalType.NUTRITION: "calories",
    GoalType.CUSTOM: "",
}


@dataclass(frozen=True)
class GoalInput:
    """Validated payload for creating a goal."""

    type: GoalType
    target_value: float
    unit: str
    target_date: date
    current_value: float = 0.0
    title: str | None = None
    description: str = ""


@dataclass(frozen=True)
class Goal:
    """A user's goal and its progress."""

    id: UUID
    user_id: UUID
    type: GoalType
    title: str
    description: str
    target_value: float
    current_value: float
    unit: str
    target_date: date
    status: GoalStatus
    created_at: datetime | None = None

    @property
    def progress(self) -> float:
        """Fraction of the target reached, between 0 and 1."""
        if self.target_value <= 0:
            return 0.0
        return min(self.current_value / self.target_value, 1.0)
