"""
Request logging middleware

Writes one line per request and reports the handling time in the
X-Process-Time header (milliseconds).
"""
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ticket_triage.utils.logger import get_logger

logger = get_logger(__name__)

QUIET_PATHS = frozenset({"/api/v1/health"})


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of API requests"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"{route} failed after {_elapsed_ms(started)}ms")
            raise

        duration_ms = _elapsed_ms(started)
        logger.info(f"{route} -> {response.status_code} ({duration_ms}ms)")
        response.headers["X-Process-Time"] = str(duration_ms)
        return response
