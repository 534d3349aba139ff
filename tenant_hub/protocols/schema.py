# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
TenantHub Protocol Schema — Users, events and documents.

Design decisions:
  - Every Event and Document carries a mandatory `tenant_id`; it is the
    partition key for storage and the topic for real-time delivery.
  - Roles and access levels are closed enums so policy decisions branch
    over a known set of values instead of free-form strings.
  - User is frozen: identities are looked up, never mutated.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2026-01-02T03:04:05.678Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    return str(uuid.uuid4())


class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


class AccessLevel(str, Enum):
    PRIVATE = "private"
    TENANT = "tenant"


class User(BaseModel):
    """Authenticated identity resolved from a bearer token."""

    id: str = Field(..., min_length=1)
    tenant_id: str = Field(..., min_length=1)
    role: Role
    token: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, tenant={self.tenant_id!r}, role={self.role.value})"


class Event(BaseModel):
    """A short text event scoped to one tenant."""

    id: str = Field(default_factory=new_id)
    tenant_id: str = Field(
        ...,
        min_length=1,
        description="Tenant partition key and broadcast topic",
    )
    message: str = Field(..., min_length=1)
    timestamp: str = Field(default_factory=utc_now_iso)

    @field_validator("id")
    @classmethod
    def id_must_be_valid_uuid(cls, v: str) -> str:
        try:
            uuid.UUID(v)
        except ValueError:
            raise ValueError(f"Event id must be a valid UUID, got '{v}'")
        return v

    def to_json(self) -> str:
        """Serialize to the JSON payload pushed to subscribers."""
        return self.model_dump_json()

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "tenant_id": "company_a",
                    "message": "hello",
                    "timestamp": "2026-01-02T03:04:05.678Z",
                }
            ]
        },
    }


class Document(BaseModel):
    """Metadata of an uploaded document; the bytes live in the blob store."""

    id: str
    tenant_id: str = Field(..., min_length=1)
    filename: str = Field(..., description="Original filename as uploaded")
    storage_filename: str = Field(
        ...,
        description="Name on disk, derived from id + extension only",
    )
    uploaded_by: str
    upload_date: str = Field(default_factory=utc_now_iso)
    access_level: AccessLevel = AccessLevel.PRIVATE

    model_config = {"frozen": True}


class EventCreateRequest(BaseModel):
    """Body of POST /events."""

    message: str = Field(..., min_length=1)
