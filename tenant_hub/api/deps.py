# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
API Dependencies — FastAPI dependency injection.

Resolved identity is also recorded on ``request.state`` so the request
log line carries the caller's tenant and user.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from tenant_hub.api.errors import MissingTenantHeaderError
from tenant_hub.core.context import HubContext
from tenant_hub.protocols.schema import User


async def get_hub(request: Request) -> HubContext:
    return request.app.state.hub


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    hub: HubContext = Depends(get_hub),
) -> User:
    """
    Resolve the caller from ``Authorization: Bearer <token>``.

    Raises AuthenticationError (401) on a missing, malformed or unknown token.
    """
    user = hub.auth.resolve(authorization)
    request.state.tenant_id = user.tenant_id
    request.state.user_id = user.id
    return user


async def get_tenant_id(
    request: Request,
    x_tenant_id: Optional[str] = Header(None, alias="x-tenant-id"),
) -> str:
    """Tenant id for unauthenticated event publishing."""
    if not x_tenant_id:
        raise MissingTenantHeaderError()
    request.state.tenant_id = x_tenant_id
    return x_tenant_id
