# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
API Middleware — Per-request trace id and tenant-scoped access log.

The dependencies in tenant_hub.api.deps record the resolved tenant and
user on ``request.state``; the access log line is written after the
handler ran, so it carries whichever of them the route resolved.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("hub.api")

TRACE_HEADER = "X-Trace-Id"


def _log_level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns the trace id and logs each request with its tenant/user context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[TRACE_HEADER] = trace_id

        context = {
            "trace_id": trace_id,
            "tenant_id": getattr(request.state, "tenant_id", None),
            "user_id": getattr(request.state, "user_id", None),
        }
        logger.log(
            _log_level_for(response.status_code),
            "%s %s -> %d (%.0fms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
            extra=context,
        )
        return response
