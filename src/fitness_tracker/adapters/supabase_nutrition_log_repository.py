"""Supabase repository for nutrition logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from fitness_tracker.domain.errors import DuplicateLogError
from fitness_tracker.domain.nutrition import FoodItem, Meal, MealType, NutritionLog
from fitness_tracker.services.nutrition_logs import NutritionLogRepository

TABLE = "nutrition_logs"
COLUMNS = (
    "id, user_id, log_date, meals, water_intake, notes, total_calories, "
    "total_protein, total_carbs, total_fat, created_at, updated_at"
)
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseNutritionLogRepository(NutritionLogRepository):
    """Supabase implementation for nutrition logs.

    Each log is one row whose meals are stored as a JSON document. A unique
    index on (user_id, log_date) backs the one-log-per-day rule.
    """

    client: Client

    def list_logs(
        self,
        user_id: UUID,
        start_date: date | None,
        end_date: date | None,
        offset: int,
        limit: int,
    ) -> tuple[list[NutritionLog], int]:
        """Return a page of logs, newest first, and the total count."""
        query = self.client.table(TABLE).select(COLUMNS, count="exact")
        query = query.eq("user_id", str(user_id))
        if start_date is not None:
            query = query.gte("log_date", start_date.isoformat())
        if end_date is not None:
            query = query.lte("log_date", end_date.isoformat())
        response = (
            query.order("log_date", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        logs = [parse_log(row) for row in response.data or []]
        return logs, response.count or 0

    def get_log(self, log_id: UUID) -> NutritionLog | None:
        """Return a log by id."""
        response = (
            self.client.table(TABLE)
            .select(COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_log(response.data[0])

    def find_log_for_day(self, user_id: UUID, day: date) -> NutritionLog | None:
        """Return the user's log for a day."""
        response = (
            self.client.table(TABLE)
            .select(COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_log(response.data[0])

    def create_log(self, log: NutritionLog) -> NutritionLog:
        """Insert a log row."""
        try:
            response = self.client.table(TABLE).insert(serialize_log(log)).execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateLogError(str(log.date)) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create nutrition log")
        return parse_log(response.data[0])

    def save_log(self, log: NutritionLog) -> NutritionLog:
        """Overwrite a log row with the full log state."""
        payload = serialize_log(log)
        payload.pop("id")
        payload.pop("created_at")
        try:
            response = (
                self.client.table(TABLE).update(payload).eq("id", str(log.id)).execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateLogError(str(log.date)) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to update nutrition log")
        return parse_log(response.data[0])

    def delete_log(self, log_id: UUID) -> None:
        """Delete a log row."""
        self.client.table(TABLE).delete().eq("id", str(log_id)).execute()


def serialize_log(log: NutritionLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "user_id": str(log.user_id),
        "log_date": log.date.isoformat(),
        "meals": [_serialize_meal(meal) for meal in log.meals],
        "water_intake": log.water_intake,
        "notes": log.notes,
        "total_calories": log.total_calories,
        "total_protein": log.total_protein,
        "total_carbs": log.total_carbs,
        "total_fat": log.total_fat,
        "created_at": log.created_at.isoformat() if log.created_at else None,
        "updated_at": log.updated_at.isoformat() if log.updated_at else None,
    }


def parse_log(row: dict[str, object]) -> NutritionLog:
    return NutritionLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["log_date"])[:10]),
        meals=[_parse_meal(meal) for meal in row.get("meals") or []],
        water_intake=float(row.get("water_intake") or 0.0),
        notes=str(row.get("notes") or ""),
        total_calories=float(row.get("total_calories") or 0.0),
        total_protein=float(row.get("total_protein") or 0.0),
        total_carbs=float(row.get("total_carbs") or 0.0),
        total_fat=float(row.get("total_fat") or 0.0),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "type": meal.type.value,
        "time": meal.time.isoformat(),
        "foods": [
            {
                "name": food.name,
                "calories": food.calories,
                "protein": food.protein,
                "carbs": food.carbs,
                "fat": food.fat,
                "quantity": food.quantity,
                "unit": food.unit,
            }
            for food in meal.foods
        ],
        "notes": meal.notes,
    }


def _parse_meal(raw: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(str(raw["id"])),
        type=MealType(str(raw.get("type") or MealType.OTHER)),
        time=_parse_datetime(raw.get("time")) or datetime.min.replace(tzinfo=UTC),
        foods=[
            FoodItem(
                name=str(food.get("name", "")),
                calories=float(food.get("calories") or 0.0),
                protein=float(food.get("protein") or 0.0),
                carbs=float(food.get("carbs") or 0.0),
                fat=float(food.get("fat") or 0.0),
                quantity=food.get("quantity"),
                unit=food.get("unit"),
            )
            for food in raw.get("foods") or []
        ],
        notes=str(raw.get("notes") or ""),
    )


def _parse_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
