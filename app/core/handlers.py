# app/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import (
    BaseAPIException,
    NotFoundError,
    RouteNotFoundError,
    UnhandledError,
    ValidationError,
)
from app.core.logging import logger


def _error_response(exc: BaseAPIException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details
            }
        },
    )

# 1. Errors raised by our own code
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return _error_response(exc)

# 2. Pydantic request validation (missing field, bad age, bad path id)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # A path id that is not an integer can never match a record
        if error["loc"][0] == "path":
            return _error_response(NotFoundError(f"Student with ID {error.get('input')} not found"))
        # Get field name (e.g., "body.email" or just "email")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return _error_response(ValidationError(details=details))

# 3. Standard HTTP errors (unknown URL or method)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error_response(RouteNotFoundError(request.method, request.url.path))

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "details": None
            }
        },
    )

# 4. Anything else (bugs, library failures)
async def general_exception_handler(request: Request, exc: Exception):
    # Full detail goes to the log only
    logger.critical(f"Unhandled Exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    return _error_response(UnhandledError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
