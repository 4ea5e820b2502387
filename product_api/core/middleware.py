"""
==============================================================================
Request Logging Middleware
==============================================================================

Logs every inbound request before any routing, authentication or
validation takes place.

Log line format:
---------------
    [2026-10-19T12:00:00.000Z] GET /api/products?page=2

==============================================================================
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


# Module logger
logger = logging.getLogger("product_api.requests")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Records timestamp, method and URL of each request.

    The request is never modified and control always passes onward.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        logger.info(f"[{utc_timestamp()}] {request.method} {url}")

        return await call_next(request)
