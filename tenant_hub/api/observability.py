# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Observability API — Health check.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tenant_hub.api.deps import get_hub
from tenant_hub.core.context import HubContext

router = APIRouter(tags=["observability"])


@router.get("/health")
async def health_check(hub: HubContext = Depends(get_hub)):
    """Liveness plus live connection counts."""
    return {
        "status": "ok",
        "version": "0.1.0",
        "subscribers": hub.broadcaster.subscriber_count(),
        "topics": len(hub.broadcaster.topics()),
        "documents": len(hub.documents),
    }
