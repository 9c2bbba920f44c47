"""Request logging middleware: one JSON line per request, traced by request id."""

import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("blconv.access")


def _log_line(request: Request, request_id: str, status: int, started: float) -> str:
    return json.dumps({
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status": status,
        "duration_ms": round((time.perf_counter() - started) * 1000, 1),
        "client": request.client.host if request.client else None,
    })


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        started = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            # Conversions can run for minutes; record the failure with its duration.
            logger.exception(_log_line(request, request_id, 500, started))
            raise

        logger.info(_log_line(request, request_id, response.status_code, started))
        response.headers["X-Request-ID"] = request_id
        return response
