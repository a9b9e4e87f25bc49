"""
Error rendering at the HTTP boundary.

Every failure is classified into a ``RideError`` and rendered as
``{"error_code": ..., "message": ...}`` with status 500, whatever its
kind.  Clients of this service branch on ``error_code``, not on status.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.errors import RideError, ValidationError, classify

logger = logging.getLogger(__name__)

ERROR_STATUS_CODE = 500
MALFORMED_BODY_MESSAGE = "Request body must be a JSON object"


def render_error(error: RideError) -> JSONResponse:
    logger.error("ERROR %s:%s", error.error_code.value, error.message)
    return JSONResponse(status_code=ERROR_STATUS_CODE, content=error.to_dict())


async def ride_error_handler(request: Request, exc: RideError) -> JSONResponse:
    return render_error(exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return render_error(ValidationError(MALFORMED_BODY_MESSAGE))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return render_error(classify(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RideError, ride_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
