"""Domain models for nutrition statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyAverages:
    """Per-log averages across the selected range."""

    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    avg_water_intake: float


@dataclass(frozen=True)
class CaloriePoint:
    """Total calories logged on one day."""

    date: str
    calories: float


@dataclass(frozen=True)
class MacroDistribution:
    """Macro sums across the selected range."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MealTypeBucket:
    """How often a meal type occurs and its average calories."""

    type: str
    count: int
    avg_calories: float


@dataclass(frozen=True)
class NutritionStats:
    """All statistics views over one filtered set of logs."""

    daily_averages: DailyAverages | None
    calories_trend: list[CaloriePoint]
    macro_distribution: MacroDistribution | None
    meal_type_distribution: list[MealTypeBucket]
