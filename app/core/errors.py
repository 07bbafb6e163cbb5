"""
Grading error taxonomy.

Every error is terminal for the request. Handlers render the caller-safe
message only, as ``{"error": message}``.
"""

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class GradingError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldError(GradingError):
    status_code = 400
    default_message = "Missing required fields"


class NotFoundError(GradingError):
    status_code = 404
    default_message = "Assignment not found"


class InternalError(GradingError):
    status_code = 500
    default_message = "Internal server error"


async def grading_error_handler(request: Request, exc: GradingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Grade submissions report malformed bodies as a missing field, like the
    # rest of the taxonomy. Other routes keep FastAPI's 422 shape.
    if request.url.path.startswith("/api/grade"):
        logger.info("Rejected grade request body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": MissingFieldError.default_message})
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})
