"""core/middleware.py — Custom ASGI middleware for the Museum Events app.

Provides:
  - RequestIDMiddleware  : reuses or issues a request ID (X-Request-ID header)
  - TimingMiddleware     : logs method, path, status, and duration per request

Both middleware classes use Starlette's BaseHTTPMiddleware and integrate with
the JSON logger configured in core/logging.py.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to every request and response.

    A well-formed incoming X-Request-ID (e.g. from a reverse proxy) is kept so
    log lines correlate across hops; otherwise a fresh UUID4 is issued.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        if incoming and len(incoming) <= _MAX_REQUEST_ID_LENGTH and incoming.isprintable():
            request_id = incoming
        else:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with its status and wall-clock duration.

    Server errors are logged at WARNING so they stand out in the JSON stream.
    Must be added before RequestIDMiddleware so the ID is already set.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
