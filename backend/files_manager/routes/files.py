"""Files API routes."""
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Query, Response

from files_manager.dependencies import (
    get_blob_store,
    get_caller,
    get_document_store,
)
from files_manager.models.file_record import FileRecord
from files_manager.schemas.base import ErrorResponse
from files_manager.schemas.file import FileResponse
from files_manager.services.authorization import Caller
from files_manager.services.hierarchy import create_record
from files_manager.services.listing import get_record, list_records
from files_manager.services.records import is_root
from files_manager.services.retrieval import fetch_content
from files_manager.services.stores import BlobStore, DocumentStore
from files_manager.services.visibility import set_public

router = APIRouter(
    prefix="/files",
    tags=["files"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post("", response_model=FileResponse, status_code=201)
async def upload_file(
    body: Any = Body(None),
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
    blobs: BlobStore = Depends(get_blob_store),
):
    """Create a folder, or upload a base64-encoded file or image.

    The body is taken as raw JSON so a missing token is reported before any
    field problem, and field problems come back as 400s in a fixed order.
    """
    record = await create_record(documents, blobs, caller, body)
    return _to_response(record)


@router.get("", response_model=list[FileResponse])
async def list_files(
    parent_id: Optional[str] = Query(None, alias="parentId"),
    page: Optional[str] = Query(None),
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
):
    """List the caller's records under a parent folder, 20 per page."""
    records = await list_records(documents, caller, parent_id, page)
    return [_to_response(r) for r in records]


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(
    file_id: str,
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
):
    """Get metadata of one of the caller's records."""
    record = await get_record(documents, caller, file_id)
    return _to_response(record)


@router.put("/{file_id}/publish", response_model=FileResponse)
async def publish_file(
    file_id: str,
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
):
    """Make a record readable by anyone."""
    record = await set_public(documents, caller, file_id, True)
    return _to_response(record)


@router.put("/{file_id}/unpublish", response_model=FileResponse)
async def unpublish_file(
    file_id: str,
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
):
    """Make a record readable by its owner only."""
    record = await set_public(documents, caller, file_id, False)
    return _to_response(record)


@router.get("/{file_id}/data")
async def get_file_data(
    file_id: str,
    caller: Caller = Depends(get_caller),
    documents: DocumentStore = Depends(get_document_store),
    blobs: BlobStore = Depends(get_blob_store),
):
    """Download the raw bytes of a file or image."""
    content = await fetch_content(documents, blobs, caller, file_id)
    return Response(content=content.data, media_type=content.content_type)


def _to_response(record: FileRecord) -> dict:
    """Convert SQLAlchemy model to response dict. local_path is never exposed."""
    return {
        "id": str(record.id),
        "user_id": record.user_id,
        "name": record.name,
        "type": record.type,
        "is_public": bool(record.is_public),
        "parent_id": 0 if is_root(record.parent_id) else record.parent_id,
    }
