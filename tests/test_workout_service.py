"""Tests for scheduled workout service."""

from datetime import timedelta
from uuid import uuid4

import pytest

from fitness_tracker.domain.errors import ForbiddenError, WorkoutNotFoundError
from fitness_tracker.services.workouts import WorkoutService
from tests.conftest import (
    FIXED_NOW,
    OTHER_USER_ID,
    USER_ID,
    InMemoryScheduledWorkoutRepository,
    fixed_clock,
    make_workout,
)


def test_list_upcoming_skips_past_and_sorts() -> None:
    repo = InMemoryScheduledWorkoutRepository()
    repo.workouts = [
        make_workout(USER_ID, FIXED_NOW + timedelta(days=3), "Legs"),
        make_workout(USER_ID, FIXED_NOW - timedelta(hours=1), "Missed"),
        make_workout(USER_ID, FIXED_NOW + timedelta(days=1), "Push"),
        make_workout(OTHER_USER_ID, FIXED_NOW + timedelta(hours=2), "Theirs"),
    ]
    service = WorkoutService(repo, clock=fixed_clock)

    upcoming = service.list_upcoming(USER_ID)

    assert [workout.name for workout in upcoming] == ["Push", "Legs"]


def test_list_upcoming_respects_limit() -> None:
    repo = InMemoryScheduledWorkoutRepository()
    repo.workouts = [
        make_workout(USER_ID, FIXED_NOW + timedelta(days=day), f"Day {day}")
        for day in range(1, 8)
    ]
    service = WorkoutService(repo, clock=fixed_clock)

    assert len(service.list_upcoming(USER_ID)) == 5
    assert len(service.list_upcoming(USER_ID, limit=2)) == 2


def test_get_scheduled_checks_owner() -> None:
    repo = InMemoryScheduledWorkoutRepository()
    workout = make_workout(USER_ID, FIXED_NOW, "Pull")
    repo.workouts = [workout]
    service = WorkoutService(repo, clock=fixed_clock)

    assert service.get_scheduled(workout.id, USER_ID) == workout
    with pytest.raises(ForbiddenError):
        service.get_scheduled(workout.id, OTHER_USER_ID)
    with pytest.raises(WorkoutNotFoundError):
        service.get_scheduled(uuid4(), USER_ID)
