"""Statistics service over nutrition logs."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import InvalidDataError
from fitness_tracker.domain.nutrition import NutritionLog
from fitness_tracker.domain.stats import (
    CaloriePoint,
    DailyAverages,
    MacroDistribution,
    MealTypeBucket,
    NutritionStats,
)


class NutritionStatsRepository(Protocol):
    """Read-only access to logs for aggregation."""

    def list_logs_in_range(
        self, user_id: UUID, start_date: date | None, end_date: date | None
    ) -> list[NutritionLog]:
        """Return every log of the user within the inclusive day range."""


@dataclass
class NutritionStatsService:
    """Service computing averages, trends and distributions."""

    repository: NutritionStatsRepository

    def get_stats(
        self,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> NutritionStats:
        """Compute every statistics view over the same filtered logs."""
        if start_date and end_date and start_date > end_date:
            raise InvalidDataError("startDate must not be after endDate")
        logs = self.repository.list_logs_in_range(user_id, start_date, end_date)
        return NutritionStats(
            daily_averages=_daily_averages(logs),
            calories_trend=_calories_trend(logs),
            macro_distribution=_macro_distribution(logs),
            meal_type_distribution=_meal_type_distribution(logs),
        )


def _daily_averages(logs: list[NutritionLog]) -> DailyAverages | None:
    if not logs:
        return None
    count = len(logs)
    return DailyAverages(
        avg_calories=sum(log.total_calories for log in logs) / count,
        avg_protein=sum(log.total_protein for log in logs) / count,
        avg_carbs=sum(log.total_carbs for log in logs) / count,
        avg_fat=sum(log.total_fat for log in logs) / count,
        avg_water_intake=sum(log.water_intake for log in logs) / count,
    )


def _calories_trend(logs: list[NutritionLog]) -> list[CaloriePoint]:
    return [
        CaloriePoint(date=log.date.isoformat(), calories=log.total_calories)
        for log in sorted(logs, key=lambda log: log.date)
    ]


def _macro_distribution(logs: list[NutritionLog]) -> MacroDistribution | None:
    if not logs:
        return None
    return MacroDistribution(
        protein=sum(log.total_protein for log in logs),
        carbs=sum(log.total_carbs for log in logs),
        fat=sum(log.total_fat for log in logs),
    )


def _meal_type_distribution(logs: list[NutritionLog]) -> list[MealTypeBucket]:
    calories_by_type: dict[str, list[float]] = defaultdict(list)
    for log in logs:
        for meal in log.meals:
            calories_by_type[str(meal.type)].append(meal.total_calories)
    buckets = [
        MealTypeBucket(
            type=meal_type,
            count=len(calories),
            avg_calories=sum(calories) / len(calories),
        )
        for meal_type, calories in calories_by_type.items()
    ]
    return sorted(buckets, key=lambda bucket: (-bucket.count, bucket.type))
