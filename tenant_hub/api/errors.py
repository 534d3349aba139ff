# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
API Error Handling — Unified error structure.

Every failure leaves the API as ``{error, code, trace_id, details}``.
Domain errors (tenant_hub.core.errors) are translated here; handlers
never build error responses by hand.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tenant_hub.core.errors import (
    AuthenticationError,
    AuthorizationError,
    HubError,
    InvalidArgumentError,
    NotFoundOrDeniedError,
    StorageError,
)

logger = logging.getLogger("hub.api")

_STATUS_BY_ERROR = (
    (InvalidArgumentError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundOrDeniedError, 404),
    (StorageError, 500),
)


class MissingTenantHeaderError(InvalidArgumentError):
    code = "MISSING_TENANT"

    def __init__(self) -> None:
        super().__init__("x-tenant-id header is required")


class InvalidUploadError(InvalidArgumentError):
    code = "INVALID_UPLOAD"


def status_for(exc: HubError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", None) or str(uuid.uuid4())


def _error_body(code: str, message: str, trace_id: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "error": message,
        "code": code,
        "trace_id": trace_id,
        "details": details,
    }


async def hub_error_handler(request: Request, exc: HubError) -> JSONResponse:
    """Global exception handler for domain errors."""
    status_code = status_for(exc)
    trace_id = _trace_id(request)
    if status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            extra={
                "trace_id": trace_id,
                "tenant_id": getattr(request.state, "tenant_id", None),
                "doc_id": exc.details.get("doc_id"),
            },
        )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.code, exc.message, trace_id, exc.details),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/param validation failures are reported as 400."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=_error_body(
            "VALIDATION_ERROR", "Request validation failed", _trace_id(request), {"errors": errors}
        ),
    )
