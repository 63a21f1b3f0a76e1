"""
notecache — Access Log Middleware
==================================

What:  One `notecache.access` line per request, naming the note it touched.
How:   After the route runs, the matched `note_name` path parameter (if any)
       is read back from the request scope and logged with the method,
       path, status, duration and request ID.

Levels:
    5xx           → ERROR
    404           → INFO    (a missing note is an ordinary lookup result)
    other 4xx     → WARNING (bad body, duplicate create)
    /health       → DEBUG   (probes run every few seconds)
    everything else → INFO

A request whose handler raises is logged as 500 before the exception
continues to the catch-all handler. Note contents are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notecache.middleware.request_id import current_request_id

logger = logging.getLogger("notecache.access")


def access_log_level(path: str, status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status == 404:
        return logging.INFO
    if status >= 400:
        return logging.WARNING
    if path == "/health":
        return logging.DEBUG
    return logging.INFO


def _note_name(request: Request) -> Optional[str]:
    return request.scope.get("path_params", {}).get("note_name")


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            note_name = _note_name(request)
            logger.log(
                access_log_level(request.url.path, status),
                "%s %s -> %d %.1fms note=%s [%s]",
                request.method,
                request.url.path,
                status,
                elapsed_ms,
                note_name if note_name is not None else "-",
                current_request_id(request),
            )
