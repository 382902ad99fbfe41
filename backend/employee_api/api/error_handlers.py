"""Error Handlers — global exception handlers for the employee API.

Invariants:
    - Every handler builds its response with core.errors.to_error_response()
    - RequestValidationError is wrapped as InvalidRequestError before mapping
    - Exception (catch-all) never leaks internal details

Design Decisions:
    - Three handler registrations (domain, validation, catch-all), one mapping
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employee_api.core.errors import (
    EmployeeApiError, ErrorKind, InvalidRequestError, classify,
    to_error_response,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_json_response(request: Request, exc: BaseException) -> JSONResponse:
    """Log and map any exception to the standard error body."""
    status_code, body = to_error_response(exc)
    if classify(exc) is ErrorKind.UNCLASSIFIED:
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "status_code": status_code},
        )
    else:
        logger.warning(
            f"{type(exc).__name__} on {request.url.path}: {body['message']}",
            extra={
                "error_code": getattr(exc, "code", None),
                "path": request.url.path,
                "status_code": status_code,
            },
        )
    return JSONResponse(status_code=status_code, content=body)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EmployeeApiError)
    async def employee_error_handler(request: Request, exc: EmployeeApiError):
        return error_json_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return error_json_response(request, _to_invalid_request(exc))


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return error_json_response(request, exc)


def _to_invalid_request(exc: RequestValidationError) -> InvalidRequestError:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    summary = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return InvalidRequestError(f"Invalid request data: {summary}", details)
