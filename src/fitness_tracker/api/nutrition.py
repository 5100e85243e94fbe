"""Nutrition log endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from fitness_tracker.api.dependencies import get_container, require_user
from fitness_tracker.api.schemas import (
    AddMealBody,
    CreateLogBody,
    FoodItemBody,
    MealBody,
    UpdateLogBody,
    UpdateMealBody,
    WaterIntakeBody,
)
from fitness_tracker.api.serializers import (
    envelope,
    serialize_log,
    serialize_meal,
    serialize_pagination,
    serialize_stats,
)
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import InvalidDataError
from fitness_tracker.domain.nutrition import (
    FoodItem,
    MealInput,
    MealPatch,
    NutritionLogPatch,
)

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.get("/logs")
async def list_logs(
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's logs, newest day first."""
    settings = container.settings
    resolved_limit = min(limit or settings.default_page_limit, settings.max_page_limit)
    result = container.nutrition_log_service.list_logs(
        user_id, start_date, end_date, page=page, limit=resolved_limit
    )
    return envelope(
        [serialize_log(log) for log in result.logs],
        count=len(result.logs),
        pagination=serialize_pagination(result),
    )


@router.get("/logs/{log_id}")
async def get_log(
    log_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    log = container.nutrition_log_service.get_log(log_id, user_id)
    return envelope(serialize_log(log))


@router.post("/logs", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: CreateLogBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create the caller's log for a day."""
    log = container.nutrition_log_service.create_log(
        user_id,
        body.log_date,
        meals=[_meal_from_body(meal) for meal in body.meals or []],
        water_intake=body.water_intake,
        notes=body.notes,
    )
    return envelope(serialize_log(log), message="Nutrition log created successfully")


@router.put("/logs/{log_id}")
async def update_log(
    log_id: UUID,
    body: UpdateLogBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Overwrite the fields present in the body."""
    supplied = body.model_fields_set
    changes: dict[str, object] = {}
    if body.log_date is not None:
        changes["log_date"] = body.log_date
    if body.meals is not None:
        changes["meals"] = [_meal_from_body(meal) for meal in body.meals]
    if "water_intake" in supplied:
        if body.water_intake is None:
            raise InvalidDataError("waterIntake cannot be null")
        changes["water_intake"] = body.water_intake
    if "notes" in supplied:
        changes["notes"] = body.notes or ""
    log = container.nutrition_log_service.update_log(
        log_id, user_id, NutritionLogPatch(**changes)
    )
    return envelope(serialize_log(log), message="Nutrition log updated successfully")


@router.delete("/logs/{log_id}")
async def delete_log(
    log_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.nutrition_log_service.delete_log(log_id, user_id)
    return envelope(message="Nutrition log deleted successfully")


@router.post("/logs/{log_id}/meals", status_code=status.HTTP_201_CREATED)
async def add_meal(
    log_id: UUID,
    body: AddMealBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Append a meal to a log."""
    meal, log = container.nutrition_log_service.add_meal(
        log_id,
        user_id,
        MealInput(
            type=body.type,
            foods=[_food_from_body(food) for food in body.foods or []],
            time=body.time,
            notes=body.notes,
        ),
    )
    return envelope(
        serialize_meal(meal),
        nutritionLog=serialize_log(log),
        message="Meal added successfully",
    )


@router.put("/logs/{log_id}/meals/{meal_id}")
async def update_meal(
    log_id: UUID,
    meal_id: UUID,
    body: UpdateMealBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Overwrite the supplied fields of one meal."""
    changes: dict[str, object] = {}
    if body.type is not None:
        changes["type"] = body.type
    if body.time is not None:
        changes["time"] = body.time
    if body.foods is not None:
        changes["foods"] = [_food_from_body(food) for food in body.foods]
    if "notes" in body.model_fields_set:
        changes["notes"] = body.notes or ""
    meal, log = container.nutrition_log_service.update_meal(
        log_id, user_id, meal_id, MealPatch(**changes)
    )
    return envelope(
        serialize_meal(meal),
        nutritionLog=serialize_log(log),
        message="Meal updated successfully",
    )


@router.delete("/logs/{log_id}/meals/{meal_id}")
async def delete_meal(
    log_id: UUID,
    meal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    log = container.nutrition_log_service.delete_meal(log_id, user_id, meal_id)
    return envelope(
        nutritionLog=serialize_log(log), message="Meal deleted successfully"
    )


@router.patch("/water")
async def update_water_intake(
    body: WaterIntakeBody,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Set water intake on the day's log, creating the log if needed."""
    log = container.nutrition_log_service.upsert_water_intake(
        user_id, body.amount, on=body.log_date
    )
    return envelope(serialize_log(log), message="Water intake updated successfully")


@router.get("/stats")
async def get_stats(
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return averages, calorie trend and distributions for the range."""
    stats = container.nutrition_stats_service.get_stats(user_id, start_date, end_date)
    return envelope(serialize_stats(stats))


def _food_from_body(body: FoodItemBody) -> FoodItem:
    return FoodItem(
        name=body.name,
        calories=body.calories,
        protein=body.protein,
        carbs=body.carbs,
        fat=body.fat,
        quantity=body.quantity,
        unit=body.unit,
    )


def _meal_from_body(body: MealBody) -> MealInput:
    return MealInput(
        id=body.id,
        type=body.type,
        time=body.time,
        foods=[_food_from_body(food) for food in body.foods],
        notes=body.notes,
    )
