# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Events API — Publish a tenant event to that tenant's live connections.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tenant_hub.api.deps import get_hub, get_tenant_id
from tenant_hub.core.context import HubContext
from tenant_hub.protocols.schema import Event, EventCreateRequest

router = APIRouter(tags=["events"])


@router.post("/events", response_model=Event)
async def create_event(
    body: EventCreateRequest,
    tenant_id: str = Depends(get_tenant_id),
    hub: HubContext = Depends(get_hub),
) -> Event:
    """Store the event and push it to every WebSocket subscribed to ``tenant_id``."""
    return hub.events.create_and_publish(tenant_id, body.message)
