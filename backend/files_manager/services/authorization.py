"""Read/write eligibility of a caller on a file record.

There is no administrative override: only the owner may write, and only the
owner may read a private record.
"""
from dataclasses import dataclass
from typing import Optional

from files_manager.models.file_record import FileRecord
from files_manager.services.exceptions import UnauthorizedError


@dataclass(frozen=True)
class Caller:
    """Identity of the request issuer.

    ``token`` is what the client presented, ``user_id`` what the session
    store resolved it to. A caller with a token but no user id presented a
    stale or bogus session.
    """
    token: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def is_authenticated(self) -> bool:
        return self.has_token and bool(self.user_id)


ANONYMOUS = Caller()


def require_authenticated(caller: Caller) -> str:
    """Return the caller's user id or raise UnauthorizedError."""
    if not caller.is_authenticated:
        raise UnauthorizedError()
    return caller.user_id


def can_write(caller: Caller, record: FileRecord) -> bool:
    return caller.is_authenticated and caller.user_id == record.user_id


def can_read(caller: Caller, record: FileRecord) -> bool:
    return bool(record.is_public) or can_write(caller, record)
