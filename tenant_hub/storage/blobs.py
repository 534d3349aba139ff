# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Blob Storage — Raw document bytes on the local filesystem.

Layout: <root>/<tenant_id>/<storage_filename>. Each tenant owns one
directory; storage filenames are generated from document ids, never
taken from user input.

All filesystem calls run in a worker thread so the event loop is only
suspended at these I/O boundaries.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path

from tenant_hub.core.errors import InvalidArgumentError

logger = logging.getLogger("hub.blobs")

_SAFE_EXTENSION = re.compile(r"^\.[A-Za-z0-9]{1,16}$")


def storage_filename_for(doc_id: str, original_filename: str) -> str:
    """
    Derive the on-disk name from the document id plus the original extension.

    Examples:
        storage_filename_for("abc", "report.pdf") -> "abc.pdf"
        storage_filename_for("abc", "REPORT.PDF") -> "abc.PDF"
        storage_filename_for("abc", "../../etc/passwd") -> "abc"
    """
    ext = os.path.splitext(Path(original_filename or "").name)[1]
    if not _SAFE_EXTENSION.match(ext):
        ext = ""
    return f"{doc_id}{ext}"


class BlobStore(ABC):
    """Byte-blob collaborator addressed by (tenant_id, storage_filename)."""

    @abstractmethod
    def locate(self, tenant_id: str, storage_filename: str) -> Path:
        ...

    @abstractmethod
    async def ensure_root(self) -> None:
        ...

    @abstractmethod
    async def write(self, tenant_id: str, storage_filename: str, data: bytes) -> Path:
        ...

    @abstractmethod
    async def delete(self, tenant_id: str, storage_filename: str) -> None:
        ...


class LocalBlobStore(BlobStore):
    """Filesystem-backed blob store; one subdirectory per tenant."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def tenant_dir(self, tenant_id: str) -> Path:
        tenant_path = (self._root / tenant_id).resolve()
        if not tenant_id or tenant_path.parent != self._root:
            raise InvalidArgumentError(f"Invalid tenant id for storage: {tenant_id!r}")
        return tenant_path

    def locate(self, tenant_id: str, storage_filename: str) -> Path:
        """Absolute blob path; rejects anything escaping the tenant directory."""
        tenant_path = self.tenant_dir(tenant_id)
        file_path = (tenant_path / storage_filename).resolve()
        if not storage_filename or file_path.parent != tenant_path:
            raise InvalidArgumentError("Invalid filename causing path traversal")
        return file_path

    async def ensure_root(self) -> None:
        await asyncio.to_thread(self._root.mkdir, parents=True, exist_ok=True)
        logger.info("Uploads directory ensured at %s", self._root)

    async def write(self, tenant_id: str, storage_filename: str, data: bytes) -> Path:
        path = self.locate(tenant_id, storage_filename)
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(path.write_bytes, data)
        logger.debug("Wrote %s (%d bytes)", path, len(data), extra={"tenant_id": tenant_id})
        return path

    async def delete(self, tenant_id: str, storage_filename: str) -> None:
        path = self.locate(tenant_id, storage_filename)
        await asyncio.to_thread(path.unlink)
        logger.debug("Removed %s", path, extra={"tenant_id": tenant_id})
