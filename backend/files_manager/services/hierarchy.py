"""Folder/file creation and parent validation."""
import base64
import binascii
import logging
import uuid
from typing import Any

from files_manager.models.file_record import FileRecord, RecordType, ROOT_PARENT_ID
from files_manager.schemas.file import FileCreate
from files_manager.services.authorization import Caller, require_authenticated
from files_manager.services.exceptions import (
    InvalidDataError,
    MissingDataError,
    MissingNameError,
    MissingTypeError,
    ParentNotAFolderError,
    ParentNotFoundError,
    StorageWriteError,
)
from files_manager.services.records import is_root, parse_record_id
from files_manager.services.stores import BlobStore, DocumentStore

logger = logging.getLogger(__name__)


def parse_upload_body(body: Any) -> FileCreate:
    """Read an upload body without rejecting it; bad shapes fail the field checks."""
    if isinstance(body, FileCreate):
        return body
    return FileCreate.model_validate(body if isinstance(body, dict) else {})


def parse_record_type(value: Any) -> RecordType:
    try:
        return RecordType(value)
    except (TypeError, ValueError):
        raise MissingTypeError()


def decode_data(data: str) -> bytes:
    """Decode base64, tolerating missing padding."""
    try:
        return base64.b64decode(data + "=" * (-len(data) % 4))
    except (binascii.Error, ValueError):
        raise InvalidDataError()


async def resolve_parent(documents: DocumentStore, parent_id: Any) -> str:
    """Return the stored form of ``parent_id``.

    The parent must be the root sentinel or an existing folder. Ownership of
    the parent is not checked, and neither is depth or cycles.
    """
    if is_root(parent_id):
        return ROOT_PARENT_ID

    record_id = parse_record_id(parent_id)
    parent = await documents.find_one(id=record_id) if record_id else None
    if parent is None:
        raise ParentNotFoundError()
    if not parent.is_folder:
        raise ParentNotAFolderError()
    return str(parent.id)


async def create_record(
    documents: DocumentStore,
    blobs: BlobStore,
    caller: Caller,
    body: Any,
) -> FileRecord:
    """Create a folder, or store a file/image blob and its metadata.

    Checks run in a fixed order and the first failure wins: name, type,
    data, parent. For files the blob is written before the metadata insert;
    if the write fails nothing is inserted, and if the insert fails the blob
    is left behind.
    """
    user_id = require_authenticated(caller)
    body = parse_upload_body(body)

    if not isinstance(body.name, str) or not body.name:
        raise MissingNameError()
    record_type = parse_record_type(body.type)
    if record_type is not RecordType.FOLDER and not (isinstance(body.data, str) and body.data):
        raise MissingDataError()
    content = decode_data(body.data) if record_type is not RecordType.FOLDER else None
    parent_id = await resolve_parent(documents, body.parent_id)

    values = {
        "name": body.name,
        "type": record_type.value,
        "user_id": user_id,
        "parent_id": parent_id,
        "is_public": bool(body.is_public),
    }

    if record_type is RecordType.FOLDER:
        record = await documents.insert_one(values)
        logger.info("Created folder %s for user %s", record.id, user_id)
        return record

    local_path = blobs.path_for(str(uuid.uuid4()))
    try:
        await blobs.ensure_root()
        await blobs.write(local_path, content)
    except OSError as e:
        logger.error("Failed to write blob %s: %s", local_path, e)
        raise StorageWriteError(str(e)) from e

    record = await documents.insert_one({**values, "local_path": local_path})
    logger.info(
        "Created %s %s (%d bytes) for user %s",
        record.type, record.id, len(content), user_id,
    )
    return record
