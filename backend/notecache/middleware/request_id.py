"""
notecache — Request ID Middleware
==================================

What:  Gives every request an ID, echoed in the X-Request-ID header.
How:   A client-supplied ID is reused only if it is short and made of
       safe characters; anything else (or nothing) gets a fresh 12-char
       hex ID. The ID is stored in a ContextVar and on request.state.

current_request_id() is what the exception handlers use. The
catch-all 500 handler runs outside this middleware, so it sets the
header itself from the value read here.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# IDs end up in log lines; no spaces or control characters
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def accept_request_id(value: str) -> str:
    """Return the client's ID if it is safe to log, otherwise a new one."""
    if value and _VALID_REQUEST_ID.match(value):
        return value
    return new_request_id()


def current_request_id(request: Request) -> str:
    return request_id_var.get("") or getattr(request.state, "request_id", "")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accept_request_id(request.headers.get(REQUEST_ID_HEADER, ""))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
