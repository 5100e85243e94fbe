"""Goal endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from fitness_tracker.api.dependencies import get_container, require_user
from fitness_tracker.api.schemas import CreateGoalBody, GoalProgressBody
from fitness_tracker.api.serializers import envelope, serialize_goal
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.goals import GoalInput, GoalStatus

router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("")
async def list_goals(
    goal_status: GoalStatus | None = Query(default=None, alias="status"),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    goals = container.goal_service.list_goals(user_id, goal_status)
    return envelope([serialize_goal(goal) for goal in goals], count=len(goals))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: CreateGoalBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a goal, typically submitted by the goal wizard."""
    goal = container.goal_service.create_goal(
        user_id,
        GoalInput(
            type=body.type,
            target_value=body.target_value,
            unit=body.unit,
            target_date=body.target_date,
            current_value=body.current_value,
            title=body.title,
            description=body.description,
        ),
    )
    return envelope(serialize_goal(goal), message="Goal created successfully")


@router.get("/{goal_id}")
async def get_goal(
    goal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    return envelope(serialize_goal(container.goal_service.get_goal(goal_id, user_id)))


@router.patch("/{goal_id}/progress")
async def update_progress(
    goal_id: UUID,
    body: GoalProgressBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    goal = container.goal_service.update_progress(goal_id, user_id, body.current_value)
    return envelope(serialize_goal(goal), message="Goal progress updated")


@router.post("/{goal_id}/abandon")
async def abandon_goal(
    goal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    goal = container.goal_service.abandon_goal(goal_id, user_id)
    return envelope(serialize_goal(goal), message="Goal abandoned")


@router.delete("/{goal_id}")
async def delete_goal(
    goal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.goal_service.delete_goal(goal_id, user_id)
    return envelope(message="Goal deleted successfully")
