"""Mapping of exceptions to the API error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fitness_tracker.api.serializers import error_envelope
from fitness_tracker.domain.errors import LogExistsError, ServiceError

_logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers so every failure leaves in the standard envelope."""

    @app.exception_handler(ServiceError)
    async def service_error(request: Request, exc: ServiceError) -> JSONResponse:
        details: dict[str, object] = {}
        if isinstance(exc, LogExistsError) and exc.existing_log_id is not None:
            details["existingLogId"] = str(exc.existing_log_id)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.code, exc.message, **details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_envelope("INVALID_DATA", _first_problem(exc)),
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception(
            "Unhandled error", extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=500, content=error_envelope("SERVER_ERROR", "Server error")
        )


def _first_problem(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid data"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "Invalid value"))
    return f"{location}: {message}" if location else message
