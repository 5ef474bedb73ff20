"""
sa_holiday_viewer.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars, with id numbers masked out of the path.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from sa_holiday_viewer.observability.logging import mask_id_number


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        # Collaborator calls re-enter the app in-process; reset (not clear) so the outer
        # request keeps its own bindings once the inner request finishes.
        tokens = structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=mask_id_number(request.url.path),
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.reset_contextvars(**tokens)

        response.headers["x-request-id"] = request_id
        return response
