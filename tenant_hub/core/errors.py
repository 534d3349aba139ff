# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Domain Errors — Failure taxonomy shared by the core components.

These exceptions carry no HTTP knowledge; the API layer maps them to
status codes (see tenant_hub.api.errors).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class HubError(Exception):
    """Base class for all domain failures."""

    code = "HUB_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(HubError):
    """A required value is missing or malformed."""

    code = "INVALID_ARGUMENT"


class AuthFailureReason(str, Enum):
    MISSING_OR_MALFORMED = "missing_or_malformed"
    INVALID_TOKEN = "invalid_token"


class AuthenticationError(HubError):
    """Missing, malformed or unknown bearer credentials."""

    code = "UNAUTHENTICATED"

    def __init__(self, reason: AuthFailureReason):
        self.reason = reason
        if reason is AuthFailureReason.INVALID_TOKEN:
            message = "Invalid token"
        else:
            message = "Missing or malformed Authorization header"
        super().__init__(message, details={"reason": reason.value})


class AuthorizationError(HubError):
    """Authenticated, but the role does not permit the operation."""

    code = "FORBIDDEN"


class NotFoundOrDeniedError(HubError):
    """
    Resource does not exist or is not visible to the caller.

    The two cases are deliberately indistinguishable so callers cannot
    probe for documents of other users or tenants.
    """

    code = "NOT_FOUND"

    def __init__(self, resource: str = "Document"):
        super().__init__(f"{resource} not found")


class StorageError(HubError):
    """Blob I/O failed."""

    code = "STORAGE_ERROR"


class StorageWriteError(StorageError):
    code = "STORAGE_WRITE_ERROR"


class StorageDeleteError(StorageError):
    code = "STORAGE_DELETE_ERROR"
