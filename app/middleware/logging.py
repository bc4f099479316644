import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# composed views that take longer than this are worth a warning
SLOW_REQUEST_MS = 1000


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id (an inbound X-Request-ID is reused), then
    logs status, timing and whether a cached view answered it."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(f"[{request_id}] {route} failed after {_elapsed_ms(started)}ms: {exc}")
            raise

        duration_ms = _elapsed_ms(started)
        cache_status = getattr(request.state, "cache_status", None)

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400 or duration_ms > SLOW_REQUEST_MS:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            f"[{request_id}] {route} -> {response.status_code} in {duration_ms}ms"
            + (f" (cache {cache_status})" if cache_status else ""),
            extra={"request_id": request_id, "duration_ms": duration_ms, "cache_status": cache_status},
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms}ms"
        if cache_status:
            response.headers["X-Cache"] = cache_status
        return response
