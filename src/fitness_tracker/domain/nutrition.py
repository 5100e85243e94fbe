"""Domain models for nutrition logging."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from fitness_tracker.domain.patches import UNSET, Unset


class MealType(StrEnum):
    """Eating occasions a meal can be filed under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"


@dataclass(frozen=True)
class FoodItem:
    """Single food entry with its macros."""

    name: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    quantity: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class Meal:
    """Eating occasion inside a nutrition log."""

    id: UUID
    type: MealType
    time: datetime
    foods: list[FoodItem]
    notes: str = ""

    @property
    def total_calories(self) -> float:
        return sum(food.calories for food in self.foods)


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macros summed over a set of foods."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass(frozen=True)
class NutritionLog:
    """One user's nutrition record for a calendar day."""

    id: UUID
    user_id: UUID
    date: date
    meals: list[Meal] = field(default_factory=list)
    water_intake: float = 0.0
    notes: str = ""
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MealInput:
    """Payload for a new meal; the service fills in a missing id and time."""

    type: MealType | None
    foods: list[FoodItem]
    time: datetime | None = None
    notes: str | None = None
    id: UUID | None = None


@dataclass(frozen=True)
class MealPatch:
    """Partial meal update; UNSET fields are left untouched."""

    type: MealType | Unset = UNSET
    time: datetime | Unset = UNSET
    foods: list[FoodItem] | Unset = UNSET
    notes: str | Unset = UNSET


@dataclass(frozen=True)
class NutritionLogPatch:
    """Partial log update; UNSET fields are left untouched."""

    log_date: date | datetime | Unset = UNSET
    meals: list[MealInput] | Unset = UNSET
    water_intake: float | Unset = UNSET
    notes: str | Unset = UNSET


@dataclass(frozen=True)
class LogPage:
    """One page of a user's nutrition logs."""

    logs: list[NutritionLog]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def has_prev(self) -> bool:
        return (self.page - 1) * self.limit > 0


def sum_meal_totals(meals: list[Meal]) -> MacroTotals:
    """Sum calories and macros over every food in the meals."""
    total = MacroTotals()
    for meal in meals:
        for food in meal.foods:
            total = MacroTotals(
                calories=total.calories + food.calories,
                protein=total.protein + food.protein,
                carbs=total.carbs + food.carbs,
                fat=total.fat + food.fat,
            )
    return total
