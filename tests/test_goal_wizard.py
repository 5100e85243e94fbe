"""Tests for the goal creation wizard."""

import asyncio
from dataclasses import dataclass, field
from datetime import date

import pytest

from fitness_tracker.domain.goals import GoalType
from fitness_tracker.wizard.goal_wizard import GoalWizard, WizardStep

TODAY = date(2024, 1, 15)


@dataclass
class RecordingGoalClient:
    """Records payloads and returns a canned goal, or raises."""

    error: Exception | None = None
    payloads: list[dict[str, object]] = field(default_factory=list)

    async def create_goal(self, payload: dict[str, object]) -> dict[str, object]:
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return {"id": "goal-1", **payload}


def _wizard(**kwargs: object) -> GoalWizard:
    return GoalWizard(today=lambda: TODAY, **kwargs)  # type: ignore[arg-type]


def _wizard_at_review(**kwargs: object) -> GoalWizard:
    wizard = _wizard(**kwargs)
    wizard.select_type(GoalType.STRENGTH)
    assert wizard.next_step()
    wizard.set_field("target_value", "225")
    wizard.set_field("current_value", "185")
    assert wizard.next_step()
    wizard.set_field("target_date", "2024-03-01")
    assert wizard.next_step()
    assert wizard.step is WizardStep.REVIEW
    return wizard


def test_type_step_requires_selection() -> None:
    wizard = _wizard()

    assert not wizard.next_step()
    assert wizard.step is WizardStep.TYPE_SELECT
    assert "type" in wizard.errors

    wizard.select_type("weight")

    assert "type" not in wizard.errors
    assert wizard.next_step()
    assert wizard.step is WizardStep.DETAILS_ENTRY


def test_selecting_type_prefills_unit_but_typed_unit_is_kept() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.WEIGHT)

    assert wizard.form.unit == "kg"

    wizard.set_field("unit", "lb")
    wizard.next_step()
    wizard.set_field("target_value", 150)
    wizard.next_step()
    wizard.set_field("target_date", date(2024, 2, 1))
    wizard.next_step()

    assert wizard.build_payload()["unit"] == "lb"


@pytest.mark.parametrize(
    ("target_value", "current_value", "unit", "error_field"),
    [
        ("", "", "kg", "target_value"),
        ("0", "", "kg", "target_value"),
        ("abc", "", "kg", "target_value"),
        ("10", "", " ", "unit"),
        ("10", "-1", "kg", "current_value"),
        ("10", "11", "kg", "current_value"),
        ("nan", "", "kg", "target_value"),
        ("inf", "", "kg", "target_value"),
        ("1e3", "", "kg", "target_value"),
        ("10", "nan", "kg", "current_value"),
        ("10", "-inf", "kg", "current_value"),
    ],
)
def test_details_step_guards(
    target_value: str, current_value: str, unit: str, error_field: str
) -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.WEIGHT)
    wizard.next_step()
    wizard.set_field("target_value", target_value)
    wizard.set_field("current_value", current_value)
    wizard.set_field("unit", unit)

    assert not wizard.next_step()
    assert wizard.step is WizardStep.DETAILS_ENTRY
    assert error_field in wizard.errors


def test_editing_a_field_clears_its_error() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.HABIT)
    wizard.next_step()
    wizard.next_step()
    assert "target_value" in wizard.errors

    wizard.set_field("target_value", "12")

    assert "target_value" not in wizard.errors


@pytest.mark.parametrize("target_date", ["", "2024-01-14", "not-a-date"])
def test_date_step_guards(target_date: str) -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.ENDURANCE)
    wizard.next_step()
    wizard.set_field("target_value", "30")
    wizard.next_step()
    wizard.set_field("target_date", target_date)

    assert not wizard.next_step()
    assert wizard.step is WizardStep.DATE_SELECT
    assert "target_date" in wizard.errors


def test_today_is_an_acceptable_target_date() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.ENDURANCE)
    wizard.next_step()
    wizard.set_field("target_value", "30")
    wizard.next_step()
    wizard.set_field("target_date", TODAY.isoformat())

    assert wizard.next_step()


def test_previous_step_walks_back_without_validation() -> None:
    wizard = _wizard_at_review()

    assert wizard.previous_step()
    assert wizard.previous_step()
    assert wizard.previous_step()
    assert wizard.step is WizardStep.TYPE_SELECT
    assert not wizard.previous_step()


def test_next_step_is_noop_on_review() -> None:
    wizard = _wizard_at_review()

    assert not wizard.next_step()
    assert wizard.step is WizardStep.REVIEW


def test_set_field_rejects_unknown_names() -> None:
    wizard = _wizard()

    with pytest.raises(ValueError):
        wizard.set_field("status", "completed")


def test_build_payload_uses_api_field_names() -> None:
    wizard = _wizard_at_review()
    wizard.set_field("title", "  Bench 225  ")

    assert wizard.build_payload() == {
        "type": "strength",
        "targetValue": 225.0,
        "currentValue": 185.0,
        "unit": "lbs",
        "targetDate": "2024-03-01",
        "description": "",
        "title": "Bench 225",
    }


def test_build_payload_defaults_current_value_to_zero() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.NUTRITION)
    wizard.set_field("target_value", "2000")

    payload = wizard.build_payload()

    assert payload["currentValue"] == 0
    assert payload["title"] == "Maintain 2000 calories diet"


def test_non_finite_number_objects_do_not_pass_details() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.WEIGHT)
    wizard.next_step()
    wizard.set_field("target_value", float("nan"))

    assert not wizard.next_step()
    assert "target_value" in wizard.errors


@pytest.mark.parametrize(
    ("goal_type", "target", "unit", "title"),
    [
        (GoalType.WEIGHT, "70", "kg", "Reach 70 kg weight"),
        (GoalType.STRENGTH, "225", "lbs", "Increase strength to 225 lbs"),
        (GoalType.ENDURANCE, "42.5", "km", "Build endurance to 42.5 km"),
        (GoalType.HABIT, "20", "sessions", "Complete 20 sessions"),
        (GoalType.NUTRITION, "2000", "calories", "Maintain 2000 calories diet"),
        (GoalType.CUSTOM, "10", "books", "Custom goal: 10 books"),
    ],
)
def test_review_summary_title_per_type(
    goal_type: GoalType, target: str, unit: str, title: str
) -> None:
    wizard = _wizard()
    wizard.select_type(goal_type)
    wizard.set_field("target_value", target)
    wizard.set_field("unit", unit)

    assert wizard.review_summary().title == title


def test_review_summary_days_and_progress() -> None:
    wizard = _wizard_at_review()

    summary = wizard.review_summary()

    assert summary.title == "Increase strength to 225 lbs"
    assert summary.days_until_target == 46
    assert summary.progress_percent == 82


def test_review_summary_rounds_half_up_and_handles_missing_values() -> None:
    wizard = _wizard()
    wizard.select_type(GoalType.HABIT)
    wizard.set_field("target_value", "8")
    wizard.set_field("current_value", "1")

    summary = wizard.review_summary()

    assert summary.progress_percent == 13
    assert summary.days_until_target == 0


def test_submitted_payload_uses_generated_title() -> None:
    wizard = _wizard_at_review()
    client = RecordingGoalClient()

    asyncio.run(wizard.submit(client))

    assert client.payloads[0]["title"] == "Increase strength to 225 lbs"


def test_submit_success_completes_and_notifies() -> None:
    completed: list[dict[str, object]] = []
    wizard = _wizard_at_review(on_complete=completed.append)
    client = RecordingGoalClient()

    goal = asyncio.run(wizard.submit(client))

    assert goal is not None
    assert goal["id"] == "goal-1"
    assert completed == [goal]
    assert wizard.completed
    assert not wizard.loading
    assert client.payloads[0]["targetValue"] == 225.0


def test_submit_failure_stays_on_review() -> None:
    completed: list[dict[str, object]] = []
    wizard = _wizard_at_review(on_complete=completed.append)
    client = RecordingGoalClient(error=RuntimeError("Server error"))

    result = asyncio.run(wizard.submit(client))

    assert result is None
    assert wizard.step is WizardStep.REVIEW
    assert wizard.submit_error == "Server error"
    assert not wizard.loading
    assert not wizard.completed
    assert completed == []


def test_submit_only_from_review() -> None:
    wizard = _wizard()
    client = RecordingGoalClient()

    assert asyncio.run(wizard.submit(client)) is None
    assert client.payloads == []


def test_submit_is_ignored_while_loading_or_completed() -> None:
    wizard = _wizard_at_review()
    client = RecordingGoalClient()

    wizard.loading = True
    assert asyncio.run(wizard.submit(client)) is None
    wizard.loading = False

    asyncio.run(wizard.submit(client))
    asyncio.run(wizard.submit(client))

    assert len(client.payloads) == 1
