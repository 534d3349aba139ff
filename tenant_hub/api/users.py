# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Users API — Who am I.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tenant_hub.api.deps import get_current_user
from tenant_hub.protocols.schema import User

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=User)
async def read_current_user(user: User = Depends(get_current_user)) -> User:
    return user
