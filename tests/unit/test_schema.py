# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.
"""Unit tests for the User / Event / Document models."""

import json
import uuid

import pytest
from pydantic import ValidationError

from tenant_hub.protocols.schema import AccessLevel, Document, Event, Role, User, utc_now_iso


class TestUser:
    def test_role_parsed_to_enum(self):
        u = User(id="u1", tenant_id="t1", role="admin", token="tok")
        assert u.role is Role.ADMIN
        assert u.role.value == "admin"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            User(id="u1", tenant_id="t1", role="owner", token="tok")

    def test_frozen(self):
        u = User(id="u1", tenant_id="t1", role=Role.MEMBER, token="tok")
        with pytest.raises(ValidationError):
            u.tenant_id = "t2"

    def test_json_shape(self):
        u = User(id="u1", tenant_id="t1", role=Role.MEMBER, token="tok")
        assert json.loads(u.model_dump_json()) == {
            "id": "u1", "tenant_id": "t1", "role": "member", "token": "tok",
        }


class TestEvent:
    def test_defaults(self):
        evt = Event(tenant_id="company_a", message="hello")
        uuid.UUID(evt.id)
        assert evt.timestamp.endswith("Z")

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            Event(tenant_id="company_a", message="")

    def test_empty_tenant_rejected(self):
        with pytest.raises(ValidationError):
            Event(tenant_id="", message="hello")

    def test_invalid_id_rejected(self):
        with pytest.raises(ValidationError, match="valid UUID"):
            Event(id="not-a-uuid", tenant_id="t", message="m")

    def test_json_roundtrip(self):
        evt = Event(tenant_id="company_a", message="hello")
        assert Event.model_validate_json(evt.to_json()) == evt


class TestDocument:
    def test_default_access_level_is_private(self):
        doc = Document(
            id="d1", tenant_id="t1", filename="a.txt",
            storage_filename="d1.txt", uploaded_by="u1",
        )
        assert doc.access_level is AccessLevel.PRIVATE
        assert doc.model_dump(mode="json")["access_level"] == "private"


def test_utc_now_iso_format():
    ts = utc_now_iso()
    # 2026-01-02T03:04:05.678Z
    assert len(ts) == 24
    assert ts[10] == "T"
