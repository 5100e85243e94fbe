"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.profiles import Profile, UnitSystem
from fitness_tracker.services.profiles import ProfileRepository

_COLUMNS = (
    "user_id, display_name, height_cm, weight_kg, birth_date, unit_system, timezone"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase-backed profile repository."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user."""
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: Profile) -> Profile:
        """Upsert the profile row keyed by user id."""
        response = (
            self.client.table("profiles")
            .upsert(
                {
                    "user_id": str(profile.user_id),
                    "display_name": profile.display_name,
                    "height_cm": profile.height_cm,
                    "weight_kg": profile.weight_kg,
                    "birth_date": profile.birth_date.isoformat()
                    if profile.birth_date
                    else None,
                    "unit_system": profile.unit_system.value,
                    "timezone": profile.timezone,
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    birth_date = row.get("birth_date")
    height = row.get("height_cm")
    weight = row.get("weight_kg")
    return Profile(
        user_id=UUID(str(row["user_id"])),
        display_name=row.get("display_name"),
        height_cm=float(height) if height is not None else None,
        weight_kg=float(weight) if weight is not None else None,
        birth_date=date.fromisoformat(str(birth_date)[:10]) if birth_date else None,
        unit_system=UnitSystem(str(row.get("unit_system") or UnitSystem.METRIC)),
        timezone=str(row.get("timezone") or "UTC"),
    )
