"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID

from fitness_tracker.domain.patches import UNSET, Unset


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class Profile:
    """Body metrics and preferences for a user."""

    user_id: UUID
    display_name: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    birth_date: date | None = None
    unit_system: UnitSystem = UnitSystem.METRIC
    timezone: str = "UTC"


@dataclass(frozen=True)
class ProfilePatch:
    """Partial profile update; None clears a nullable field."""

    display_name: str | None | Unset = UNSET
    height_cm: float | None | Unset = UNSET
    weight_kg: float | None | Unset = UNSET
    birth_date: date | None | Unset = UNSET
    unit_system: UnitSystem | Unset = UNSET
    timezone: str | Unset = UNSET
