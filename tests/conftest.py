# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Shared test fixtures for all TenantHub tests.
"""

from __future__ import annotations

from typing import List

import pytest
from fastapi.testclient import TestClient

from tenant_hub.core.config import HubSettings
from tenant_hub.documents.store import DocumentStore
from tenant_hub.events.store import EventStore
from tenant_hub.identity.directory import IdentityDirectory
from tenant_hub.kernel.broadcaster import InMemoryBroadcaster
from tenant_hub.main import create_app
from tenant_hub.protocols.schema import Role, User
from tenant_hub.storage.blobs import LocalBlobStore


class RecordingSink:
    """Broadcaster sink that keeps every payload it receives."""

    def __init__(self) -> None:
        self.payloads: List[str] = []

    def __call__(self, payload: str) -> None:
        self.payloads.append(payload)


@pytest.fixture
def directory() -> IdentityDirectory:
    return IdentityDirectory.default()


@pytest.fixture
def admin_a(directory) -> User:
    return directory.lookup("token_admin_a")


@pytest.fixture
def user_a(directory) -> User:
    return directory.lookup("token_user_a")


@pytest.fixture
def admin_b(directory) -> User:
    return directory.lookup("token_admin_b")


@pytest.fixture
def member_a2() -> User:
    """A second member of company_a, not in the default directory."""
    return User(id="user_a2", tenant_id="company_a", role=Role.MEMBER, token="token_user_a2")


@pytest.fixture
def member_b() -> User:
    return User(id="user_b", tenant_id="company_b", role=Role.MEMBER, token="token_user_b")


@pytest.fixture
def broadcaster() -> InMemoryBroadcaster:
    return InMemoryBroadcaster()


@pytest.fixture
def event_store(broadcaster) -> EventStore:
    return EventStore(broadcaster)


@pytest.fixture
def blob_store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(tmp_path / "uploads")


@pytest.fixture
def document_store(blob_store) -> DocumentStore:
    return DocumentStore(blob_store)


@pytest.fixture
def settings(tmp_path) -> HubSettings:
    return HubSettings(
        _env_file=None,
        UPLOADS_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
        LOG_JSON=False,
    )


@pytest.fixture
def client(settings):
    """TestClient with lifespan running, so app.state.hub is populated."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_sink():
    """Factory for RecordingSink instances."""
    return RecordingSink
