# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Event Store — Append-only, tenant-partitioned event log with fan-out.

create -> append -> publish: an event is recorded before it is handed to
the Broadcaster, and the Broadcaster only ever sees the event's own
tenant as topic.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from pydantic import ValidationError

from tenant_hub.core.errors import InvalidArgumentError
from tenant_hub.kernel.broadcaster import Broadcaster
from tenant_hub.protocols.schema import Event

logger = logging.getLogger("hub.events")


class EventStore:
    """In-memory event log keyed by tenant id; insertion order is preserved."""

    def __init__(self, broadcaster: Broadcaster) -> None:
        self._broadcaster = broadcaster
        self._events: Dict[str, List[Event]] = {}

    def create_and_publish(self, tenant_id: str, message: str) -> Event:
        """
        Record a new event for ``tenant_id`` and publish it to that tenant's topic.

        Raises:
            InvalidArgumentError: tenant_id or message is empty.
        """
        if not tenant_id:
            raise InvalidArgumentError("tenant_id is required")
        try:
            event = Event(tenant_id=tenant_id, message=message)
        except ValidationError as exc:
            raise InvalidArgumentError(
                "Invalid event", details={"errors": exc.errors(include_url=False)}
            ) from exc

        self._events.setdefault(tenant_id, []).append(event)
        logger.info(
            "Event stored",
            extra={"tenant_id": tenant_id, "event_id": event.id},
        )

        delivered = self._broadcaster.publish(tenant_id, event.to_json())
        logger.info(
            "Event broadcast to %d subscribers", delivered,
            extra={"tenant_id": tenant_id, "event_id": event.id},
        )
        return event

    def list_events(self, tenant_id: str) -> List[Event]:
        """The tenant's events in append order (a copy)."""
        return list(self._events.get(tenant_id, ()))
