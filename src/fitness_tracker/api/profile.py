"""Profile endpoints for the authenticated user."""

from uuid import UUID

from fastapi import APIRouter, Depends

from fitness_tracker.api.dependencies import get_container, require_user
from fitness_tracker.api.schemas import UpdateProfileBody
from fitness_tracker.api.serializers import envelope, serialize_profile
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import InvalidDataError
from fitness_tracker.domain.profiles import ProfilePatch

router = APIRouter(prefix="/api/profile", tags=["profile"])

_NON_NULLABLE = frozenset({"unit_system", "timezone"})


@router.get("")
async def get_profile(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    return envelope(serialize_profile(container.profile_service.get_profile(user_id)))


@router.put("")
async def update_profile(
    body: UpdateProfileBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Write the supplied fields; null clears the nullable ones."""
    changes = {name: getattr(body, name) for name in body.model_fields_set}
    for name in changes.keys() & _NON_NULLABLE:
        if changes[name] is None:
            raise InvalidDataError(f"{name} cannot be null")
    profile = container.profile_service.update_profile(
        user_id, ProfilePatch(**changes)
    )
    return envelope(serialize_profile(profile), message="Profile updated successfully")
