"""Scheduled workout endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from fitness_tracker.api.dependencies import get_container, require_user
from fitness_tracker.api.serializers import envelope, serialize_workout
from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/api/workouts/scheduled", tags=["workouts"])


@router.get("/upcoming")
async def upcoming_workouts(
    limit: int = Query(default=5, ge=1, le=50),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's next scheduled workouts, soonest first."""
    workouts = container.workout_service.list_upcoming(user_id, limit=limit)
    return envelope(
        [serialize_workout(workout) for workout in workouts], count=len(workouts)
    )


@router.get("/{workout_id}")
async def get_scheduled_workout(
    workout_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    workout = container.workout_service.get_scheduled(workout_id, user_id)
    return envelope(serialize_workout(workout))
