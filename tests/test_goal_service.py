"""Tests for goal service."""

from datetime import date
from uuid import uuid4

import pytest

from fitness_tracker.domain.errors import (
    ForbiddenError,
    GoalNotFoundError,
    InvalidDataError,
)
from fitness_tracker.domain.goals import GoalInput, GoalStatus, GoalType
from fitness_tracker.services.goals import GoalService
from tests.conftest import OTHER_USER_ID, USER_ID, InMemoryGoalRepository, fixed_clock


def _service() -> GoalService:
    return GoalService(InMemoryGoalRepository(), clock=fixed_clock)


def _input(**overrides: object) -> GoalInput:
    values: dict[str, object] = {
        "type": GoalType.WEIGHT,
        "target_value": 80,
        "unit": "kg",
        "target_date": date(2024, 6, 1),
    }
    values.update(overrides)
    return GoalInput(**values)  # type: ignore[arg-type]


def test_create_goal_defaults_title_and_status() -> None:
    service = _service()

    goal = service.create_goal(USER_ID, _input(current_value=10))

    assert goal.title == "Weight goal"
    assert goal.status is GoalStatus.ACTIVE
    assert goal.progress == pytest.approx(0.125)


@pytest.mark.parametrize(
    "overrides",
    [
        {"target_value": 0},
        {"unit": "  "},
        {"current_value": -1},
        {"current_value": 81},
        {"target_date": date(2024, 1, 14)},
    ],
)
def test_create_goal_rejects_invalid_input(overrides: dict[str, object]) -> None:
    service = _service()

    with pytest.raises(InvalidDataError):
        service.create_goal(USER_ID, _input(**overrides))


def test_list_goals_filters_by_status() -> None:
    service = _service()
    kept = service.create_goal(USER_ID, _input())
    dropped = service.create_goal(USER_ID, _input(type=GoalType.HABIT, unit="days"))
    service.abandon_goal(dropped.id, USER_ID)
    service.create_goal(OTHER_USER_ID, _input())

    active = service.list_goals(USER_ID, GoalStatus.ACTIVE)

    assert [goal.id for goal in active] == [kept.id]
    assert len(service.list_goals(USER_ID)) == 2


def test_update_progress_clamps_and_completes() -> None:
    service = _service()
    goal = service.create_goal(USER_ID, _input())

    halfway = service.update_progress(goal.id, USER_ID, 40)
    done = service.update_progress(goal.id, USER_ID, 95)

    assert halfway.status is GoalStatus.ACTIVE
    assert done.current_value == 80
    assert done.status is GoalStatus.COMPLETED
    assert done.progress == 1.0


def test_terminal_goals_reject_further_changes() -> None:
    service = _service()
    goal = service.create_goal(USER_ID, _input())
    service.abandon_goal(goal.id, USER_ID)

    with pytest.raises(InvalidDataError):
        service.update_progress(goal.id, USER_ID, 10)
    with pytest.raises(InvalidDataError):
        service.abandon_goal(goal.id, USER_ID)


def test_goal_access_is_owner_only() -> None:
    service = _service()
    goal = service.create_goal(USER_ID, _input())

    with pytest.raises(ForbiddenError):
        service.get_goal(goal.id, OTHER_USER_ID)
    with pytest.raises(ForbiddenError):
        service.delete_goal(goal.id, OTHER_USER_ID)
    with pytest.raises(GoalNotFoundError):
        service.get_goal(uuid4(), USER_ID)


def test_delete_goal() -> None:
    service = _service()
    goal = service.create_goal(USER_ID, _input())

    service.delete_goal(goal.id, USER_ID)

    with pytest.raises(GoalNotFoundError):
        service.get_goal(goal.id, USER_ID)
