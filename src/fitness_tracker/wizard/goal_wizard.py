"""Step-by-step goal creation flow.

The wizard walks a user through four linear steps. Each forward transition is
guarded by the validation of the step being left; failed guards keep the
wizard in place and record a message per offending field, the way a form
shows inline errors. Submission happens from the review step only and goes
through a `GoalClient`, normally the HTTP client for the goals API.
"""

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Protocol

from fitness_tracker.domain.goals import DEFAULT_UNITS, GoalType

_logger = logging.getLogger(__name__)


class WizardStep(StrEnum):
    TYPE_SELECT = "type_select"
    DETAILS_ENTRY = "details_entry"
    DATE_SELECT = "date_select"
    REVIEW = "review"


_STEPS = list(WizardStep)

_DECIMAL = re.compile(r"^[0-9]*\.?[0-9]+$")

_TITLE_TEMPLATES: dict[GoalType, str] = {
    GoalType.WEIGHT: "Reach {target} {unit} weight",
    GoalType.STRENGTH: "Increase strength to {target} {unit}",
    GoalType.ENDURANCE: "Build endurance to {target} {unit}",
    GoalType.HABIT: "Complete {target} {unit}",
    GoalType.NUTRITION: "Maintain {target} {unit} diet",
    GoalType.CUSTOM: "Custom goal: {target} {unit}",
}

_FORM_FIELDS = frozenset(
    {"title", "description", "target_value", "current_value", "unit", "target_date"}
)


class GoalClient(Protocol):
    """Interface for persisting a goal from the wizard."""

    async def create_goal(self, payload: dict[str, object]) -> dict[str, object]:
        """Create a goal and return the stored record."""


@dataclass
class GoalForm:
    """Raw form state; values stay as typed until submission."""

    type: GoalType | None = None
    title: str = ""
    description: str = ""
    target_value: str | float = ""
    current_value: str | float = ""
    unit: str = ""
    target_date: str | date = ""


@dataclass(frozen=True)
class GoalSummary:
    """What the review step shows before submission."""

    title: str
    days_until_target: int
    progress_percent: int


@dataclass
class GoalWizard:
    """Finite-state machine behind the goal creation wizard."""

    today: Callable[[], date] = field(default=date.today)
    on_complete: Callable[[dict[str, object]], None] | None = None
    form: GoalForm = field(default_factory=GoalForm)
    step: WizardStep = WizardStep.TYPE_SELECT
    errors: dict[str, str] = field(default_factory=dict)
    loading: bool = False
    submit_error: str | None = None
    created_goal: dict[str, object] | None = None

    @property
    def completed(self) -> bool:
        return self.created_goal is not None

    def select_type(self, goal_type: GoalType | str) -> None:
        """Pick a goal type and pre-fill its usual unit."""
        resolved = GoalType(goal_type)
        self.form.type = resolved
        self.form.unit = DEFAULT_UNITS[resolved]
        self.errors.pop("type", None)
        self.errors.pop("unit", None)

    def set_field(self, name: str, value: object) -> None:
        """Update one form field and clear its error."""
        if name not in _FORM_FIELDS:
            raise ValueError(f"Unknown goal field: {name}")
        setattr(self.form, name, value)
        self.errors.pop(name, None)

    def next_step(self) -> bool:
        """Advance one step if the current step validates."""
        if self.step is WizardStep.REVIEW:
            return False
        self.errors = self._validate(self.step)
        if self.errors:
            return False
        self.step = _STEPS[_STEPS.index(self.step) + 1]
        return True

    def previous_step(self) -> bool:
        """Go back one step; always allowed except from the first."""
        index = _STEPS.index(self.step)
        if index == 0:
            return False
        self.step = _STEPS[index - 1]
        return True

    def build_payload(self) -> dict[str, object]:
        """Convert the form into the API's goal creation body."""
        goal_type = self.form.type
        target_date = _parse_date(self.form.target_date)
        payload: dict[str, object] = {
            "type": goal_type.value if goal_type else None,
            "targetValue": _parse_number(self.form.target_value),
            "currentValue": _parse_number(self.form.current_value) or 0,
            "unit": self.form.unit.strip(),
            "targetDate": target_date.isoformat() if target_date else None,
            "description": self.form.description.strip(),
        }
        payload["title"] = self.form.title.strip() or self.review_summary().title
        return payload

    def review_summary(self) -> GoalSummary:
        """Summarize the form: generated title, days left and progress."""
        target = _parse_number(self.form.target_value)
        current = _parse_number(self.form.current_value) or 0.0
        target_date = _parse_date(self.form.target_date)
        if target is None:
            target_text = str(self.form.target_value).strip()
        else:
            target_text = _format_number(target)
        template = _TITLE_TEMPLATES[self.form.type or GoalType.CUSTOM]
        title = template.format(target=target_text, unit=self.form.unit.strip())
        days = abs((target_date - self.today()).days) if target_date else 0
        progress = math.floor(current / target * 100 + 0.5) if target else 0
        return GoalSummary(
            title=title, days_until_target=days, progress_percent=progress
        )

    async def submit(self, client: GoalClient) -> dict[str, object] | None:
        """Post the goal; on failure stay on review with the error kept."""
        if self.step is not WizardStep.REVIEW or self.loading or self.completed:
            return None
        self.loading = True
        self.submit_error = None
        try:
            goal = await client.create_goal(self.build_payload())
        except Exception as exc:
            _logger.exception("Goal creation failed")
            self.submit_error = str(exc) or type(exc).__name__
            return None
        finally:
            self.loading = False
        self.created_goal = goal
        if self.on_complete is not None:
            self.on_complete(goal)
        return goal

    def _validate(self, step: WizardStep) -> dict[str, str]:
        if step is WizardStep.TYPE_SELECT:
            return _validate_type(self.form)
        if step is WizardStep.DETAILS_ENTRY:
            return _validate_details(self.form)
        if step is WizardStep.DATE_SELECT:
            return _validate_date(self.form, self.today())
        return {}


def _validate_type(form: GoalForm) -> dict[str, str]:
    if form.type is None:
        return {"type": "Please select a goal type"}
    return {}


def _validate_details(form: GoalForm) -> dict[str, str]:
    errors: dict[str, str] = {}
    target = _parse_number(form.target_value)
    if target is None or target <= 0:
        errors["target_value"] = "Please enter a valid target value greater than 0"
    if not form.unit.strip():
        errors["unit"] = "Please enter a unit"
    if not _is_blank(form.current_value):
        current = _parse_number(form.current_value)
        if current is None or current < 0:
            errors["current_value"] = "Current value must be a non-negative number"
        elif target is not None and current > target:
            errors["current_value"] = "Current value cannot exceed target value"
    return errors


def _validate_date(form: GoalForm, today: date) -> dict[str, str]:
    target_date = _parse_date(form.target_date)
    if target_date is None:
        return {"target_date": "Please select a target date"}
    if target_date < today:
        return {"target_date": "Target date cannot be in the past"}
    return {}


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str) and _DECIMAL.match(value.strip()):
        return float(value.strip())
    return None


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def _parse_date(value: object) -> date | None:
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None
