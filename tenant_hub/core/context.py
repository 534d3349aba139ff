# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Hub Context — Holds all core component references.

Built once in the application lifespan and stored on ``app.state.hub``;
API handlers reach it through FastAPI dependencies.
"""

from __future__ import annotations

import logging
from typing import Optional

from tenant_hub.core.config import HubSettings
from tenant_hub.documents.store import DocumentStore
from tenant_hub.events.store import EventStore
from tenant_hub.identity.auth import AuthResolver
from tenant_hub.identity.directory import IdentityDirectory, build_identity_directory
from tenant_hub.kernel.broadcaster import Broadcaster, InMemoryBroadcaster
from tenant_hub.storage.blobs import BlobStore, LocalBlobStore

logger = logging.getLogger("hub.context")


class HubContext:
    """Wires directory, resolver, broadcaster and stores together."""

    def __init__(
        self,
        directory: IdentityDirectory,
        blobs: BlobStore,
        broadcaster: Optional[Broadcaster] = None,
    ) -> None:
        self.directory = directory
        self.auth = AuthResolver(directory)
        self.broadcaster: Broadcaster = broadcaster or InMemoryBroadcaster()
        self.events = EventStore(self.broadcaster)
        self.blobs = blobs
        self.documents = DocumentStore(blobs)

    @classmethod
    def from_settings(cls, settings: HubSettings) -> HubContext:
        directory = build_identity_directory(settings.IDENTITY_FILE)
        return cls(directory=directory, blobs=LocalBlobStore(settings.UPLOADS_DIR))

    async def start(self) -> None:
        await self.blobs.ensure_root()
        logger.info("Hub context ready: %r", self.directory)
