# backend/houses_api/middleware/request_id.py
"""
Per-request correlation id.

The id is kept in two places: a ContextVar read by the JSON log formatter while
the request runs, and `request.state.request_id`, which outlives the middleware
so the app's 500 handler (called outside it) can still return the id.
"""
from __future__ import annotations

import re
import uuid
from contextvars import ContextVar
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# client ids end up in logs and response headers
_CLIENT_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def request_id_of(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _incoming_or_new(request: Request) -> str:
    # header lookup is case-insensitive
    rid = request.headers.get(REQUEST_ID_HEADER, "")
    return rid if _CLIENT_ID.match(rid) else uuid.uuid4().hex


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = _incoming_or_new(request)
        request.state.request_id = rid

        token = request_id_ctx.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
