"""Nutrition log service: per-day logs, meals and water intake."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from fitness_tracker.domain.errors import (
    DuplicateLogError,
    ForbiddenError,
    FutureDateError,
    InvalidDataError,
    LogExistsError,
    LogNotFoundError,
    MealNotFoundError,
)
from fitness_tracker.domain.nutrition import (
    LogPage,
    Meal,
    MealInput,
    MealPatch,
    NutritionLog,
    NutritionLogPatch,
    sum_meal_totals,
)
from fitness_tracker.domain.patches import is_set

_logger = logging.getLogger(__name__)


class NutritionLogRepository(Protocol):
    """Persistence interface for nutrition logs."""

    def list_logs(
        self,
        user_id: UUID,
        start_date: date | None,
        end_date: date | None,
        offset: int,
        limit: int,
    ) -> tuple[list[NutritionLog], int]:
        """Return a page of logs, newest first, and the total match count."""

    def get_log(self, log_id: UUID) -> NutritionLog | None:
        """Return a log by id, if present."""

    def find_log_for_day(self, user_id: UUID, day: date) -> NutritionLog | None:
        """Return the user's log for a calendar day, if present."""

    def create_log(self, log: NutritionLog) -> NutritionLog:
        """Insert a log; raise DuplicateLogError if the day is taken."""

    def save_log(self, log: NutritionLog) -> NutritionLog:
        """Overwrite a stored log with the given state."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a log."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class NutritionLogService:
    """CRUD over nutrition logs with ownership checks."""

    repository: NutritionLogRepository
    local_timezone: str = "UTC"
    clock: Callable[[], datetime] = field(default=_utcnow)

    def list_logs(
        self,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> LogPage:
        """Return one page of the user's logs, newest day first."""
        if page < 1 or limit < 1:
            raise InvalidDataError("Page and limit must be positive")
        logs, total = self.repository.list_logs(
            user_id, start_date, end_date, offset=(page - 1) * limit, limit=limit
        )
        return LogPage(logs=logs, total=total, page=page, limit=limit)

    def get_log(self, log_id: UUID, user_id: UUID) -> NutritionLog:
        """Return a log the user owns."""
        return self._owned_log(log_id, user_id)

    def create_log(
        self,
        user_id: UUID,
        logged_on: date | datetime,
        meals: list[MealInput] | None = None,
        water_intake: float | None = None,
        notes: str | None = None,
    ) -> NutritionLog:
        """Create the user's log for a day that has none yet."""
        day = utc_day(logged_on)
        if day > self.clock().astimezone(UTC).date():
            raise FutureDateError()
        if water_intake is not None and water_intake < 0:
            raise InvalidDataError("Water intake cannot be negative")
        new_meals = self._new_meals(meals or [])
        existing = self.repository.find_log_for_day(user_id, day)
        if existing is not None:
            raise LogExistsError(existing.id)

        now = self.clock()
        log = _with_totals(
            NutritionLog(
                id=uuid4(),
                user_id=user_id,
                date=day,
                meals=new_meals,
                water_intake=water_intake or 0.0,
                notes=notes or "",
                created_at=now,
                updated_at=now,
            )
        )
        try:
            created = self.repository.create_log(log)
        except DuplicateLogError as exc:
            raise LogExistsError(self._existing_id(user_id, day)) from exc
        _logger.info(
            "Nutrition log created",
            extra={"user_id": str(user_id), "log_id": str(created.id)},
        )
        return created

    def update_log(
        self, log_id: UUID, user_id: UUID, patch: NutritionLogPatch
    ) -> NutritionLog:
        """Overwrite only the fields supplied in the patch."""
        log = self._owned_log(log_id, user_id)
        changes: dict[str, object] = {}
        if is_set(patch.log_date):
            changes["date"] = utc_day(patch.log_date)
        if is_set(patch.meals):
            changes["meals"] = self._new_meals(patch.meals)
        if is_set(patch.water_intake):
            if patch.water_intake < 0:
                raise InvalidDataError("Water intake cannot be negative")
            changes["water_intake"] = patch.water_intake
        if is_set(patch.notes):
            changes["notes"] = patch.notes
        updated = _with_totals(replace(log, **changes, updated_at=self.clock()))
        try:
            return self.repository.save_log(updated)
        except DuplicateLogError as exc:
            raise LogExistsError(self._existing_id(user_id, updated.date)) from exc

    def delete_log(self, log_id: UUID, user_id: UUID) -> None:
        """Delete a log the user owns."""
        log = self._owned_log(log_id, user_id)
        self.repository.delete_log(log.id)
        _logger.info(
            "Nutrition log deleted",
            extra={"user_id": str(user_id), "log_id": str(log.id)},
        )

    def add_meal(
        self, log_id: UUID, user_id: UUID, payload: MealInput
    ) -> tuple[Meal, NutritionLog]:
        """Append a meal to a log and persist the whole log."""
        meal = self._new_meal(payload)
        log = self._owned_log(log_id, user_id)
        saved = self._save_meals(log, [*log.meals, meal])
        return meal, saved

    def update_meal(
        self, log_id: UUID, user_id: UUID, meal_id: UUID, patch: MealPatch
    ) -> tuple[Meal, NutritionLog]:
        """Overwrite the supplied fields of one meal."""
        log = self._owned_log(log_id, user_id)
        index = _meal_index(log, meal_id)
        changes: dict[str, object] = {}
        if is_set(patch.type):
            changes["type"] = patch.type
        if is_set(patch.time):
            changes["time"] = patch.time
        if is_set(patch.foods):
            if not patch.foods:
                raise InvalidDataError("A meal needs at least one food item")
            changes["foods"] = list(patch.foods)
        if is_set(patch.notes):
            changes["notes"] = patch.notes
        meal = replace(log.meals[index], **changes)
        meals = list(log.meals)
        meals[index] = meal
        return meal, self._save_meals(log, meals)

    def delete_meal(self, log_id: UUID, user_id: UUID, meal_id: UUID) -> NutritionLog:
        """Remove one meal from a log."""
        log = self._owned_log(log_id, user_id)
        index = _meal_index(log, meal_id)
        meals = [meal for position, meal in enumerate(log.meals) if position != index]
        return self._save_meals(log, meals)

    def upsert_water_intake(
        self,
        user_id: UUID,
        amount: float | None,
        on: date | datetime | None = None,
    ) -> NutritionLog:
        """Set water intake on the local day's log, creating it if needed."""
        if amount is None:
            raise InvalidDataError("Water amount is required")
        if amount < 0:
            raise InvalidDataError("Water amount cannot be negative")
        day = self.local_day(on)
        existing = self.repository.find_log_for_day(user_id, day)
        now = self.clock()
        if existing is not None:
            return self.repository.save_log(
                replace(existing, water_intake=amount, updated_at=now)
            )
        log = NutritionLog(
            id=uuid4(),
            user_id=user_id,
            date=day,
            water_intake=amount,
            created_at=now,
            updated_at=now,
        )
        try:
            return self.repository.create_log(log)
        except DuplicateLogError:
            # Lost a create race for the same day; write onto the winner.
            winner = self.repository.find_log_for_day(user_id, day)
            if winner is None:
                raise
            return self.repository.save_log(
                replace(winner, water_intake=amount, updated_at=now)
            )

    def local_day(self, on: date | datetime | None) -> date:
        """Return the calendar day of `on` in the configured local timezone."""
        tz = ZoneInfo(self.local_timezone)
        if on is None:
            return self.clock().astimezone(tz).date()
        if isinstance(on, datetime):
            if on.tzinfo is None:
                return on.date()
            return on.astimezone(tz).date()
        return on

    def _owned_log(self, log_id: UUID, user_id: UUID) -> NutritionLog:
        log = self.repository.get_log(log_id)
        if log is None:
            raise LogNotFoundError()
        if log.user_id != user_id:
            raise ForbiddenError("Not authorized to access this nutrition log")
        return log

    def _new_meal(self, payload: MealInput, meal_id: UUID | None = None) -> Meal:
        if payload.type is None or not payload.foods:
            raise InvalidDataError(
                "Meal type and at least one food item are required"
            )
        return Meal(
            id=meal_id or uuid4(),
            type=payload.type,
            time=payload.time or self.clock(),
            foods=list(payload.foods),
            notes=payload.notes or "",
        )

    def _new_meals(self, payloads: list[MealInput]) -> list[Meal]:
        """Build a log's meals; ids must be unique within the log."""
        meals = [self._new_meal(payload, payload.id) for payload in payloads]
        if len({meal.id for meal in meals}) != len(meals):
            raise InvalidDataError("Meal ids must be unique within a log")
        return meals

    def _save_meals(self, log: NutritionLog, meals: list[Meal]) -> NutritionLog:
        updated = _with_totals(replace(log, meals=meals, updated_at=self.clock()))
        return self.repository.save_log(updated)

    def _existing_id(self, user_id: UUID, day: date) -> UUID | None:
        existing = self.repository.find_log_for_day(user_id, day)
        return existing.id if existing else None


def utc_day(value: date | datetime) -> date:
    """Normalize a date or datetime to its UTC calendar day."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(UTC).date()
    return value


def _meal_index(log: NutritionLog, meal_id: UUID) -> int:
    for index, meal in enumerate(log.meals):
        if meal.id == meal_id:
            return index
    raise MealNotFoundError()


def _with_totals(log: NutritionLog) -> NutritionLog:
    totals = sum_meal_totals(log.meals)
    return replace(
        log,
        total_calories=totals.calories,
        total_protein=totals.protein,
        total_carbs=totals.carbs,
        total_fat=totals.fat,
    )
