"""Store interfaces the files core talks to.

The core never reaches for a global client: routes hand it whichever
implementation the dependencies provide (SQL/Redis/disk in production,
in-memory fakes in tests).
"""
import uuid
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from files_manager.models.file_record import FileRecord


@runtime_checkable
class SessionStore(Protocol):
    """Maps an opaque auth token to a user id."""

    async def resolve(self, token: str) -> Optional[str]: ...


@runtime_checkable
class DocumentStore(Protocol):
    """Persists FileRecord metadata in the ``files`` collection."""

    async def insert_one(self, values: dict[str, Any]) -> FileRecord: ...

    async def find_one(self, **criteria: Any) -> Optional[FileRecord]: ...

    async def find_many(
        self, criteria: dict[str, Any], skip: int = 0, limit: Optional[int] = None
    ) -> Sequence[FileRecord]: ...

    async def update_one(self, record_id: uuid.UUID, values: dict[str, Any]) -> None: ...


@runtime_checkable
class BlobStore(Protocol):
    """Reads and writes raw bytes under a storage root."""

    async def ensure_root(self) -> None: ...

    def path_for(self, blob_id: str) -> str: ...

    async def exists(self, path: str) -> bool: ...

    async def write(self, path: str, data: bytes) -> None: ...

    async def read(self, path: str) -> bytes: ...
