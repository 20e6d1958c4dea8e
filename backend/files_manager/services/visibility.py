"""Publishing and unpublishing of records by their owner."""
import logging

from files_manager.models.file_record import FileRecord
from files_manager.services.authorization import Caller, can_write, require_authenticated
from files_manager.services.exceptions import NotFoundError, UnauthorizedError
from files_manager.services.records import require_record_id
from files_manager.services.stores import DocumentStore

logger = logging.getLogger(__name__)


async def set_public(
    documents: DocumentStore,
    caller: Caller,
    file_id: str,
    value: bool,
) -> FileRecord:
    """Set ``is_public`` on one of the caller's records and return it re-read.

    The update and the re-read are separate store calls; a concurrent
    writer between them wins.
    """
    user_id = require_authenticated(caller)
    if not file_id:
        raise UnauthorizedError()
    record_id = require_record_id(file_id)

    record = await documents.find_one(id=record_id, user_id=user_id)
    if record is None or not can_write(caller, record):
        raise NotFoundError()

    await documents.update_one(record_id, {"is_public": value})
    logger.info("Set is_public=%s on %s", value, record_id)

    record = await documents.find_one(id=record_id, user_id=user_id)
    if record is None:
        raise NotFoundError()
    return record
