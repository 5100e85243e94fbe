"""Error taxonomy shared by services and the HTTP layer."""

from uuid import UUID


class ServiceError(Exception):
    """Base error mapped to an API error envelope."""

    code = "SERVER_ERROR"
    message = "Server error"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidDataError(ServiceError):
    """Request payload failed validation."""

    code = "INVALID_DATA"
    message = "Invalid data"
    status_code = 400


class FutureDateError(ServiceError):
    """A log was requested for a day after today."""

    code = "FUTURE_DATE"
    message = "Cannot create nutrition log for future dates"
    status_code = 400


class LogExistsError(ServiceError):
    """A log already exists for the requested day."""

    code = "LOG_EXISTS"
    message = "A nutrition log already exists for this date"
    status_code = 400

    def __init__(self, existing_log_id: UUID | None) -> None:
        super().__init__()
        self.existing_log_id = existing_log_id


class ForbiddenError(ServiceError):
    """The record exists but belongs to another user."""

    code = "FORBIDDEN"
    message = "Not authorized to access this resource"
    status_code = 403


class NotAuthorizedError(ServiceError):
    """No authenticated identity accompanies the request."""

    code = "NOT_AUTHORIZED"
    message = "Authentication required"
    status_code = 401


class LogNotFoundError(ServiceError):
    code = "LOG_NOT_FOUND"
    message = "Nutrition log not found"
    status_code = 404


class MealNotFoundError(ServiceError):
    code = "MEAL_NOT_FOUND"
    message = "Meal not found"
    status_code = 404


class GoalNotFoundError(ServiceError):
    code = "GOAL_NOT_FOUND"
    message = "Goal not found"
    status_code = 404


class WorkoutNotFoundError(ServiceError):
    code = "WORKOUT_NOT_FOUND"
    message = "Scheduled workout not found"
    status_code = 404


class DuplicateLogError(Exception):
    """Raised by repositories when the per-day uniqueness constraint fires."""
