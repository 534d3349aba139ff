# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
WebSocket Event Push — Real-time tenant event streaming.
"""

from __future__ import annotations

import asyncio
import logging
import uuid

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from tenant_hub.core.context import HubContext

router = APIRouter()
logger = logging.getLogger("hub.ws")


async def _pump(websocket: WebSocket, queue: asyncio.Queue) -> None:
    """Forward queued payloads to the client in publish order."""
    while True:
        payload = await queue.get()
        await websocket.send_text(payload)


@router.websocket("/ws")
async def websocket_events(
    websocket: WebSocket,
    tenant_id: str = Query(..., alias="tenantId", min_length=1),
):
    """
    WebSocket endpoint for real-time event streaming.

    - Subscribes the connection to the topic named after ``tenantId``
    - Pushes every event published for that tenant as JSON
    - Unsubscribes on disconnect; client messages are ignored
    """
    hub: HubContext = websocket.app.state.hub
    connection_id = uuid.uuid4().hex
    context = {"tenant_id": tenant_id, "connection_id": connection_id}

    queue: asyncio.Queue[str] = asyncio.Queue()
    # Registered before the handshake completes.
    hub.broadcaster.subscribe(tenant_id, connection_id, queue.put_nowait)
    sender = None

    try:
        await websocket.accept()
        sender = asyncio.create_task(_pump(websocket, queue))
        logger.info("WS connected", extra=context)
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.info("WS disconnected (code=%s)", message.get("code"), extra=context)
                break
            logger.debug("WS client frame ignored", extra=context)
    except WebSocketDisconnect:
        logger.info("WS disconnected", extra=context)
    finally:
        hub.broadcaster.unsubscribe(tenant_id, connection_id)
        if sender is not None:
            sender.cancel()
            try:
                await sender
            except asyncio.CancelledError:
                pass
            except Exception as exc:
                logger.warning("WS sender stopped with error: %s", exc, extra=context)
