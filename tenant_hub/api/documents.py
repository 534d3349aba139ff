# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Documents API — Upload, list, download and delete tenant documents.

All visibility decisions are made by the DocumentStore; this module only
translates multipart/HTTP details.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import FileResponse

from tenant_hub.api.deps import get_current_user, get_hub
from tenant_hub.api.errors import InvalidUploadError
from tenant_hub.core.context import HubContext
from tenant_hub.core.errors import NotFoundOrDeniedError, StorageDeleteError
from tenant_hub.protocols.schema import AccessLevel, Document, User

logger = logging.getLogger("hub.api.documents")

router = APIRouter(prefix="/documents", tags=["documents"])


def _parse_access_level(raw: Optional[str]) -> AccessLevel:
    if not raw:
        return AccessLevel.PRIVATE
    try:
        return AccessLevel(raw.strip().lower())
    except ValueError:
        allowed = ", ".join(level.value for level in AccessLevel)
        raise InvalidUploadError(f"access_level must be one of: {allowed}")


@router.post("", response_model=Document)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    access_level: Optional[str] = Form(None),
    user: User = Depends(get_current_user),
    hub: HubContext = Depends(get_hub),
) -> Document:
    """
    Upload a file as multipart/form-data.

    Fields:
      - file: the document (required)
      - access_level: "private" (default) or "tenant"
    """
    if file is None or not file.filename:
        raise InvalidUploadError("No file uploaded")
    level = _parse_access_level(access_level)

    data = await file.read()
    return await hub.documents.upload(data, file.filename, user, level)


@router.get("", response_model=List[Document])
async def list_documents(
    user: User = Depends(get_current_user),
    hub: HubContext = Depends(get_hub),
) -> List[Document]:
    return hub.documents.list_accessible(user)


@router.get("/{doc_id}")
async def download_document(
    doc_id: str,
    user: User = Depends(get_current_user),
    hub: HubContext = Depends(get_hub),
) -> FileResponse:
    """Raw file bytes, served under the original filename."""
    doc, path = hub.documents.resolve_for_download(doc_id, user)
    if not path.is_file():
        logger.error(
            "Metadata present but blob missing",
            extra={"tenant_id": doc.tenant_id, "doc_id": doc.id},
        )
        raise NotFoundOrDeniedError()
    return FileResponse(path, filename=doc.filename)


@router.delete("/{doc_id}", status_code=204)
async def delete_document(
    doc_id: str,
    user: User = Depends(get_current_user),
    hub: HubContext = Depends(get_hub),
) -> Response:
    """
    Admin-only delete. A blob that cannot be removed is reported like a
    missing document; the metadata stays so the delete can be retried.
    """
    try:
        await hub.documents.delete_by_id(doc_id, user)
    except StorageDeleteError as exc:
        raise NotFoundOrDeniedError() from exc
    return Response(status_code=204)
