"""Pydantic request bodies for the REST API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fitness_tracker.domain.goals import GoalType
from fitness_tracker.domain.nutrition import MealType
from fitness_tracker.domain.profiles import UnitSystem


class CamelModel(BaseModel):
    """Base body accepting camelCase keys (and snake_case names)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class FoodItemBody(CamelModel):
    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None


class MealBody(CamelModel):
    """Meal embedded in a log create/replace body."""

    id: UUID | None = None
    type: MealType
    time: datetime | None = None
    foods: list[FoodItemBody] = Field(min_length=1)
    notes: str = ""


class AddMealBody(CamelModel):
    """Body for adding a meal; completeness is checked by the service."""

    type: MealType | None = None
    time: datetime | None = None
    foods: list[FoodItemBody] | None = None
    notes: str | None = None


class UpdateMealBody(CamelModel):
    type: MealType | None = None
    time: datetime | None = None
    foods: list[FoodItemBody] | None = None
    notes: str | None = None


class CreateLogBody(CamelModel):
    log_date: datetime | date = Field(alias="date")
    meals: list[MealBody] | None = None
    water_intake: float | None = Field(default=None, ge=0)
    notes: str | None = None


class UpdateLogBody(CamelModel):
    log_date: datetime | date | None = Field(default=None, alias="date")
    meals: list[MealBody] | None = None
    water_intake: float | None = Field(default=None, ge=0)
    notes: str | None = None


class WaterIntakeBody(CamelModel):
    amount: float | None = Field(default=None, ge=0)
    log_date: datetime | date | None = Field(default=None, alias="date")


class CreateGoalBody(CamelModel):
    type: GoalType
    target_value: float
    unit: str
    target_date: date
    current_value: float = 0.0
    title: str | None = None
    description: str = ""


class GoalProgressBody(CamelModel):
    current_value: float


class UpdateProfileBody(CamelModel):
    display_name: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    birth_date: date | None = None
    unit_system: UnitSystem | None = None
    timezone: str | None = None
