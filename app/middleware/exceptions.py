from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.schemas.response import ErrorResponse, ErrorDetail
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging
import uuid

logger = logging.getLogger(__name__)

ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    404: "NOT_FOUND",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_SERVER_ERROR",
}

# pydantic error types that mean "required field absent or blank"
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _error_json(
    request: Request,
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
    body = ErrorResponse(
        error=ErrorDetail(
            code=ERROR_CODES.get(status_code, f"HTTP_{status_code}"),
            message=message,
            details=details,
        ),
        timestamp=datetime.utcnow().isoformat(),
        path=str(request.url),
        request_id=request_id,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def missing_fields(errors: List[Dict[str, Any]]) -> List[str]:
    return [
        str(error["loc"][-1])
        for error in errors
        if error.get("type") in MISSING_ERROR_TYPES and error.get("loc")
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = missing_fields(errors)
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return _error_json(
        request,
        422,
        "Missing fields" if missing else "Request validation failed",
        details={"missing": missing, "validation_errors": jsonable_encoder(errors)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {message}")
    return _error_json(request, exc.status_code, message, headers=getattr(exc, "headers", None))


async def global_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, (HTTPException, StarletteHTTPException)):
        return await http_exception_handler(request, exc)

    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error_json(request, 500, "Something went wrong", details={"error_type": type(exc).__name__})
