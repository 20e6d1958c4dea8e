"""Owner-scoped listing and lookup of file records."""
import re
from typing import Any, Optional, Sequence

from files_manager.models.file_record import FileRecord, ROOT_PARENT_ID
from files_manager.services.authorization import Caller, require_authenticated
from files_manager.services.exceptions import NotFoundError
from files_manager.services.records import is_root, parse_record_id, require_record_id
from files_manager.services.stores import DocumentStore

PAGE_SIZE = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_page(page: Any) -> int:
    """Zero-based page number taken from the leading digits ("2abc" is 2).

    Anything without leading digits, or negative, is page 0.
    """
    if isinstance(page, int):
        return max(page, 0)
    match = _LEADING_INT.match(str(page)) if page is not None else None
    return max(int(match.group(1)), 0) if match else 0


def parent_filter(parent_id: Any) -> str:
    """Stored form of a listing's parentId query value.

    Ids that parse as UUIDs are canonicalised; anything else is compared
    literally and simply matches nothing.
    """
    if is_root(parent_id):
        return ROOT_PARENT_ID
    record_id = parse_record_id(parent_id)
    return str(record_id) if record_id else str(parent_id)


async def list_records(
    documents: DocumentStore,
    caller: Caller,
    parent_id: Optional[str] = None,
    page: Any = None,
) -> Sequence[FileRecord]:
    """One page of the caller's records directly under ``parent_id``."""
    user_id = require_authenticated(caller)
    return await documents.find_many(
        {"user_id": user_id, "parent_id": parent_filter(parent_id)},
        skip=parse_page(page) * PAGE_SIZE,
        limit=PAGE_SIZE,
    )


async def get_record(documents: DocumentStore, caller: Caller, file_id: str) -> FileRecord:
    """The caller's own record with this id; anyone else's is NotFound."""
    user_id = require_authenticated(caller)
    record = await documents.find_one(id=require_record_id(file_id), user_id=user_id)
    if record is None:
        raise NotFoundError()
    return record
