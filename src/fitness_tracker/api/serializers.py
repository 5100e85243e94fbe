"""JSON shapes for API responses."""

from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.nutrition import FoodItem, LogPage, Meal, NutritionLog
from fitness_tracker.domain.profiles import Profile
from fitness_tracker.domain.stats import NutritionStats
from fitness_tracker.domain.workouts import ScheduledWorkout


def envelope(
    data: object = None, message: str | None = None, **extra: object
) -> dict[str, object]:
    """Wrap a successful result in the standard response envelope."""
    body: dict[str, object] = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    if message:
        body["message"] = message
    return body


def error_envelope(
    code: str, message: str, **details: object
) -> dict[str, object]:
    return {"success": False, "error": {"code": code, "message": message, **details}}


def serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "quantity": food.quantity,
        "unit": food.unit,
    }


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "type": meal.type.value,
        "time": meal.time.isoformat(),
        "foods": [serialize_food(food) for food in meal.foods],
        "notes": meal.notes,
        "totalCalories": meal.total_calories,
    }


def serialize_log(log: NutritionLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "userId": str(log.user_id),
        "date": log.date.isoformat(),
        "meals": [serialize_meal(meal) for meal in log.meals],
        "waterIntake": log.water_intake,
        "notes": log.notes,
        "totalCalories": log.total_calories,
        "totalProtein": log.total_protein,
        "totalCarbs": log.total_carbs,
        "totalFat": log.total_fat,
        "createdAt": log.created_at.isoformat() if log.created_at else None,
        "updatedAt": log.updated_at.isoformat() if log.updated_at else None,
    }


def serialize_pagination(page: LogPage) -> dict[str, object]:
    """Describe a page; next/prev only appear when those pages exist."""
    pagination: dict[str, object] = {}
    if page.has_next:
        pagination["next"] = {"page": page.page + 1, "limit": page.limit}
    if page.has_prev:
        pagination["prev"] = {"page": page.page - 1, "limit": page.limit}
    pagination.update(
        {
            "total": page.total,
            "pages": page.pages,
            "page": page.page,
            "limit": page.limit,
        }
    )
    return pagination


def serialize_stats(stats: NutritionStats) -> dict[str, object]:
    averages = stats.daily_averages
    macros = stats.macro_distribution
    return {
        "dailyAverages": {
            "avgCalories": averages.avg_calories,
            "avgProtein": averages.avg_protein,
            "avgCarbs": averages.avg_carbs,
            "avgFat": averages.avg_fat,
            "avgWaterIntake": averages.avg_water_intake,
        }
        if averages
        else None,
        "caloriesTrend": [
            {"date": point.date, "calories": point.calories}
            for point in stats.calories_trend
        ],
        "macroDistribution": {
            "protein": macros.protein,
            "carbs": macros.carbs,
            "fat": macros.fat,
        }
        if macros
        else None,
        "mealTypeDistribution": [
            {
                "type": bucket.type,
                "count": bucket.count,
                "avgCalories": bucket.avg_calories,
            }
            for bucket in stats.meal_type_distribution
        ],
    }


def serialize_goal(goal: Goal) -> dict[str, object]:
    return {
        "id": str(goal.id),
        "userId": str(goal.user_id),
        "type": goal.type.value,
        "title": goal.title,
        "description": goal.description,
        "targetValue": goal.target_value,
        "currentValue": goal.current_value,
        "unit": goal.unit,
        "targetDate": goal.target_date.isoformat(),
        "status": goal.status.value,
        "progress": goal.progress,
        "createdAt": goal.created_at.isoformat() if goal.created_at else None,
    }


def serialize_workout(workout: ScheduledWorkout) -> dict[str, object]:
    return {
        "id": str(workout.id),
        "name": workout.name,
        "scheduledAt": workout.scheduled_at.isoformat(),
        "templateId": str(workout.template_id) if workout.template_id else None,
        "durationMinutes": workout.duration_minutes,
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "userId": str(profile.user_id),
        "displayName": profile.display_name,
        "heightCm": profile.height_cm,
        "weightKg": profile.weight_kg,
        "birthDate": profile.birth_date.isoformat() if profile.birth_date else None,
        "unitSystem": profile.unit_system.value,
        "timezone": profile.timezone,
    }
