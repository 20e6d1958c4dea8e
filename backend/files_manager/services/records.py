"""Identifier helpers shared by the record operations."""
import uuid
from typing import Any, Optional

from files_manager.models.file_record import ROOT_PARENT_ID
from files_manager.services.exceptions import NotFoundError


def parse_record_id(value: Any) -> Optional[uuid.UUID]:
    """Parse a record id, returning None when it is not a valid UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def require_record_id(value: Any) -> uuid.UUID:
    """Parse a record id from a request path; malformed ids are NotFound."""
    record_id = parse_record_id(value) if value else None
    if record_id is None:
        raise NotFoundError()
    return record_id


def is_root(parent_id: Any) -> bool:
    """True for the top-level sentinel in any of its wire forms (absent, 0, "0")."""
    return not parent_id or str(parent_id) == ROOT_PARENT_ID
