"""User profile service."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fitness_tracker.domain.errors import InvalidDataError
from fitness_tracker.domain.patches import is_set
from fitness_tracker.domain.profiles import Profile, ProfilePatch


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile, if present."""

    def save_profile(self, profile: Profile) -> Profile:
        """Insert or overwrite the user's profile."""


@dataclass
class ProfileService:
    """Reads and updates the caller's own profile."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile:
        """Return the profile, creating an empty one on first access."""
        existing = self.repository.get_profile(user_id)
        if existing is not None:
            return existing
        return self.repository.save_profile(Profile(user_id=user_id))

    def update_profile(self, user_id: UUID, patch: ProfilePatch) -> Profile:
        """Apply the supplied fields to the user's profile."""
        profile = self.get_profile(user_id)
        changes = {
            name: getattr(patch, name)
            for name in (
                "display_name",
                "height_cm",
                "weight_kg",
                "birth_date",
                "unit_system",
                "timezone",
            )
            if is_set(getattr(patch, name))
        }
        if "timezone" in changes and not _is_valid_timezone(changes["timezone"]):
            raise InvalidDataError("Timezone must be a valid IANA name")
        for name in ("height_cm", "weight_kg"):
            value = changes.get(name)
            if value is not None and value <= 0:
                raise InvalidDataError(f"{name} must be positive")
        return self.repository.save_profile(replace(profile, **changes))


def _is_valid_timezone(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
