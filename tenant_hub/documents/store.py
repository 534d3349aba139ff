# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Document Store — Document metadata in memory, bytes in the BlobStore.

Every read, list and delete goes through the access policy. Denials
surface as NotFoundOrDeniedError, identical to a missing document.

Consistency rules:
  - upload: blob first, metadata only after the write succeeded.
  - delete: blob first, metadata only after the removal succeeded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tenant_hub.core.errors import (
    AuthorizationError,
    InvalidArgumentError,
    NotFoundOrDeniedError,
    StorageDeleteError,
    StorageWriteError,
)
from tenant_hub.documents.policy import can_delete, is_visible, may_delete
from tenant_hub.protocols.schema import AccessLevel, Document, User, new_id
from tenant_hub.storage.blobs import BlobStore, storage_filename_for

logger = logging.getLogger("hub.docs")


class DocumentStore:
    def __init__(self, blobs: BlobStore) -> None:
        self._blobs = blobs
        self._documents: Dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def _new_document_id(self) -> str:
        doc_id = new_id()
        while doc_id in self._documents:
            doc_id = new_id()
        return doc_id

    # ── Upload ──────────────────────────────────────────────────

    async def upload(
        self,
        data: bytes,
        filename: str,
        user: User,
        access_level: AccessLevel = AccessLevel.PRIVATE,
    ) -> Document:
        """
        Store ``data`` in the uploader's tenant namespace and record its metadata.

        Raises:
            InvalidArgumentError: no filename given.
            StorageWriteError: the blob could not be written; no metadata is kept.
        """
        if not filename:
            raise InvalidArgumentError("filename is required")

        doc_id = self._new_document_id()
        storage_filename = storage_filename_for(doc_id, filename)
        context = {"tenant_id": user.tenant_id, "user_id": user.id, "doc_id": doc_id}

        try:
            await self._blobs.write(user.tenant_id, storage_filename, data)
        except OSError as exc:
            logger.error("Blob write failed during upload: %s", exc, extra={**context, "operation": "upload"})
            await self._discard_partial_blob(user.tenant_id, storage_filename, context)
            raise StorageWriteError(
                "Failed to store document",
                details={"operation": "upload", "doc_id": doc_id},
            ) from exc

        document = Document(
            id=doc_id,
            tenant_id=user.tenant_id,
            filename=filename,
            storage_filename=storage_filename,
            uploaded_by=user.id,
            access_level=access_level,
        )
        self._documents[doc_id] = document
        logger.info("Document uploaded (%d bytes)", len(data), extra=context)
        return document

    async def _discard_partial_blob(self, tenant_id: str, storage_filename: str, context: dict) -> None:
        try:
            await self._blobs.delete(tenant_id, storage_filename)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("Could not remove partial blob: %s", exc, extra=context)

    # ── Read ────────────────────────────────────────────────────

    def list_accessible(self, user: User) -> List[Document]:
        return [doc for doc in self._documents.values() if is_visible(user, doc)]

    def get_visible(self, doc_id: str, user: User) -> Document:
        doc: Optional[Document] = self._documents.get(doc_id)
        if doc is None or not is_visible(user, doc):
            raise NotFoundOrDeniedError()
        return doc

    def resolve_for_download(self, doc_id: str, user: User) -> Tuple[Document, Path]:
        """Document plus blob path, or NotFoundOrDeniedError."""
        doc = self.get_visible(doc_id, user)
        return doc, self._blobs.locate(doc.tenant_id, doc.storage_filename)

    # ── Delete ──────────────────────────────────────────────────

    async def delete_by_id(self, doc_id: str, user: User) -> Document:
        """
        Remove a document's blob and metadata.

        Raises:
            AuthorizationError: caller is not an admin (nothing is looked up or touched).
            NotFoundOrDeniedError: missing, or outside the admin's tenant.
            StorageDeleteError: blob removal failed; metadata is kept for retry.
        """
        context = {"tenant_id": user.tenant_id, "user_id": user.id, "doc_id": doc_id}
        if not may_delete(user):
            logger.warning("Non-admin user attempted to delete a document", extra=context)
            raise AuthorizationError("Only admins can delete documents")

        doc: Optional[Document] = self._documents.get(doc_id)
        if doc is None or not can_delete(user, doc):
            raise NotFoundOrDeniedError()

        try:
            await self._blobs.delete(doc.tenant_id, doc.storage_filename)
        except FileNotFoundError:
            logger.warning("Blob already missing, removing metadata only", extra=context)
        except OSError as exc:
            logger.error("Blob delete failed: %s", exc, extra={**context, "operation": "delete"})
            raise StorageDeleteError(
                "Failed to delete document",
                details={"operation": "delete", "doc_id": doc_id},
            ) from exc

        self._documents.pop(doc_id, None)
        logger.info("Document deleted by admin", extra=context)
        return doc
