"""Translate domain and validation errors into GraphQL-style error envelopes."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.enums import ErrorCode
from domain.errors import BookingPlatformError, NotFoundError


logger = logging.getLogger(__name__)

REQUEST_PARTS = ("body", "query", "path", "header")


async def booking_error_handler(request: Request, exc: BookingPlatformError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    elif not isinstance(exc, NotFoundError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message} (field={exc.field})")
    return JSONResponse(status_code=exc.status_code, content={"errors": [exc.to_graphql_error()]})


def error_field(loc) -> Optional[str]:
    """
    Name the offending key the way business rule errors do.

    Restaurant settings keys are reported bare (`frequenceCreneauxMinutes`,
    not `settings.frequenceCreneauxMinutes`); list indexes and nested keys
    below the named key are dropped.
    """
    location = [part for part in loc if part not in REQUEST_PARTS]
    if len(location) > 1 and location[0] == "settings":
        location = location[1:]
    return str(location[0]) if location else None


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        errors.append({
            "message": error.get("msg", "Invalid input"),
            "extensions": {
                "code": ErrorCode.BAD_USER_INPUT.value,
                "field": error_field(error.get("loc", ())),
            },
        })
    logger.info(f"Invalid input for {request.method} {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(status_code=400, content={"errors": errors})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(BookingPlatformError, booking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
