"""Access log for the export readiness API.

One JSON line per request on the ``readiness.access`` logger. 5xx responses
and unhandled errors log at ERROR and 4xx at WARNING, so rejected tokens and
invalid export checks stand out from normal traffic. Every response carries
an ``X-Request-ID``; a caller-supplied one is kept so traces line up across
the frontend and the API.
"""

import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("readiness.access")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64


def resolve_request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
        return incoming
    return uuid.uuid4().hex[:8]


def client_address(request: Request) -> str | None:
    # First hop of X-Forwarded-For when behind the hosting proxy.
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = resolve_request_id(request)
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._emit(request, request_id, 500, started, error=True)
            raise

        self._emit(request, request_id, response.status_code, started)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _emit(request: Request, request_id: str, status: int, started: float, error: bool = False) -> None:
        record = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            "client": client_address(request),
            "authenticated": "authorization" in request.headers,
        }
        if error:
            record["error"] = "unhandled exception"
        logger.log(level_for_status(status), json.dumps(record))
