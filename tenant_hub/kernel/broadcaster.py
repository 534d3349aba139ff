# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Broadcaster — Tenant-scoped topic fan-out.

A topic is a tenant id. Connections subscribe to exactly one topic and
only receive payloads published to it; this is the isolation boundary
for real-time delivery.

Sinks are plain callables taking the serialized payload. They must not
block: the WebSocket endpoint hands in ``queue.put_nowait`` and drains
the queue in its own sender task.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

logger = logging.getLogger("hub.broadcaster")

Sink = Callable[[str], None]


class Broadcaster(ABC):
    """Minimal pub/sub capability used by the EventStore and the transport."""

    @abstractmethod
    def publish(self, topic: str, payload: str) -> int:
        """Deliver ``payload`` to every subscriber of ``topic``. Returns delivered count."""
        ...

    @abstractmethod
    def subscribe(self, topic: str, connection_id: str, sink: Sink) -> None:
        ...

    @abstractmethod
    def unsubscribe(self, topic: str, connection_id: str) -> bool:
        """Remove a subscription. Returns False if it was not registered."""
        ...

    @abstractmethod
    def subscriber_count(self, topic: Optional[str] = None) -> int:
        """Live subscribers of ``topic``, or of all topics when None."""
        ...

    @abstractmethod
    def topics(self) -> List[str]:
        ...


class InMemoryBroadcaster(Broadcaster):
    """Single-process topic registry: topic -> {connection_id: sink}."""

    def __init__(self) -> None:
        self._topics: Dict[str, Dict[str, Sink]] = {}

    # ── Publish ─────────────────────────────────────────────────

    def publish(self, topic: str, payload: str) -> int:
        subscribers = self._topics.get(topic)
        if not subscribers:
            return 0

        delivered = 0
        failed: List[str] = []
        # Snapshot: a sink may trigger unsubscribe while we iterate.
        for connection_id, sink in list(subscribers.items()):
            try:
                sink(payload)
                delivered += 1
            except Exception as exc:
                logger.warning(
                    "Dropping subscriber after delivery failure: %s", exc,
                    extra={"tenant_id": topic, "connection_id": connection_id},
                )
                failed.append(connection_id)

        for connection_id in failed:
            self.unsubscribe(topic, connection_id)

        logger.debug("Published to %s (%d receivers)", topic, delivered)
        return delivered

    # ── Subscribe ───────────────────────────────────────────────

    def subscribe(self, topic: str, connection_id: str, sink: Sink) -> None:
        if not topic:
            raise ValueError("topic must not be empty")
        self._topics.setdefault(topic, {})[connection_id] = sink
        logger.info(
            "Subscribed to topic %s", topic,
            extra={"tenant_id": topic, "connection_id": connection_id},
        )

    def unsubscribe(self, topic: str, connection_id: str) -> bool:
        subscribers = self._topics.get(topic)
        if not subscribers or connection_id not in subscribers:
            return False
        del subscribers[connection_id]
        if not subscribers:
            del self._topics[topic]
        logger.info(
            "Unsubscribed from topic %s", topic,
            extra={"tenant_id": topic, "connection_id": connection_id},
        )
        return True

    # ── Introspection ───────────────────────────────────────────

    def subscriber_count(self, topic: Optional[str] = None) -> int:
        if topic is not None:
            return len(self._topics.get(topic, {}))
        return sum(len(subs) for subs in self._topics.values())

    def topics(self) -> List[str]:
        return list(self._topics.keys())
