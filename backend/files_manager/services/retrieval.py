"""Resolution of a record id to its content bytes.

This is the only read path open to anonymous callers: public records are
served to anyone, private ones only to their owner. Every failure after the
folder check is reported as NotFound so a probe cannot tell a private record
from a missing one.
"""
import logging
import mimetypes
from dataclasses import dataclass

from files_manager.services.authorization import Caller, can_read
from files_manager.services.exceptions import NoContentForFolderError, NotFoundError
from files_manager.services.records import require_record_id
from files_manager.services.stores import BlobStore, DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class Content:
    data: bytes
    content_type: str


def content_type_for(name: str) -> str:
    content_type, _ = mimetypes.guess_type(name)
    return content_type or DEFAULT_CONTENT_TYPE


async def fetch_content(
    documents: DocumentStore,
    blobs: BlobStore,
    caller: Caller,
    file_id: str,
) -> Content:
    record_id = require_record_id(file_id)

    record = await documents.find_one(id=record_id)
    if record is None:
        raise NotFoundError()
    if record.is_folder:
        raise NoContentForFolderError()

    if not record.is_public:
        if not caller.is_authenticated:
            raise NotFoundError()
        record = await documents.find_one(id=record_id, user_id=caller.user_id)
        if record is None:
            raise NotFoundError()

    if not can_read(caller, record):
        raise NotFoundError()

    if not record.local_path or not await blobs.exists(record.local_path):
        logger.warning("Blob missing for record %s", record_id)
        raise NotFoundError()

    try:
        data = await blobs.read(record.local_path)
    except OSError as e:
        logger.warning("Failed to read blob for record %s: %s", record_id, e)
        raise NotFoundError() from e

    return Content(data=data, content_type=content_type_for(record.name))
