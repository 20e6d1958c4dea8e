"""Shared fixtures: in-memory stores, an HTTP client and an async SQLite engine."""
import base64
import uuid
from typing import Any, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from files_manager.dependencies import get_blob_store, get_document_store, get_session_store
from files_manager.main import app
from files_manager.models import Base, FileRecord
from files_manager.services.authorization import Caller

ALICE = "user-alice"
BOB = "user-bob"
TOKENS = {"alice-token": ALICE, "bob-token": BOB}


def b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


class InMemoryDocumentStore:
    """Document store over a list, in insertion order."""

    def __init__(self):
        self.records: list[FileRecord] = []
        self.calls: list[str] = []

    def _matches(self, record: FileRecord, criteria: dict[str, Any]) -> bool:
        return all(getattr(record, key) == value for key, value in criteria.items())

    async def insert_one(self, values: dict[str, Any]) -> FileRecord:
        self.calls.append("insert_one")
        record = FileRecord(id=uuid.uuid4(), **values)
        self.records.append(record)
        return record

    async def find_one(self, **criteria: Any) -> Optional[FileRecord]:
        self.calls.append("find_one")
        return next((r for r in self.records if self._matches(r, criteria)), None)

    async def find_many(self, criteria, skip=0, limit=None):
        self.calls.append("find_many")
        matches = [r for r in self.records if self._matches(r, criteria)]
        end = None if limit is None else skip + limit
        return matches[skip:end]

    async def update_one(self, record_id, values):
        self.calls.append("update_one")
        for record in self.records:
            if record.id == record_id:
                for key, value in values.items():
                    setattr(record, key, value)


class InMemoryBlobStore:
    """Blob store over a dict; set ``fail_writes`` to simulate a full disk."""

    def __init__(self, root: str = "/blobs"):
        self.root = root
        self.blobs: dict[str, bytes] = {}
        self.root_ensured = False
        self.fail_writes = False
        self.fail_reads = False

    async def ensure_root(self) -> None:
        self.root_ensured = True

    def path_for(self, blob_id: str) -> str:
        return f"{self.root}/{blob_id}"

    async def exists(self, path: str) -> bool:
        return path in self.blobs

    async def write(self, path: str, data: bytes) -> None:
        if self.fail_writes:
            raise OSError(28, "No space left on device")
        self.blobs[path] = data

    async def read(self, path: str) -> bytes:
        if self.fail_reads:
            raise OSError(5, "Input/output error")
        return self.blobs[path]


class InMemorySessionStore:
    def __init__(self, sessions: dict[str, str]):
        self.sessions = dict(sessions)
        self.lookups = 0

    async def resolve(self, token: str) -> Optional[str]:
        self.lookups += 1
        return self.sessions.get(token)


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def blobs() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore(TOKENS)


@pytest.fixture
def alice() -> Caller:
    return Caller(token="alice-token", user_id=ALICE)


@pytest.fixture
def bob() -> Caller:
    return Caller(token="bob-token", user_id=BOB)


@pytest.fixture
async def client(documents, blobs, sessions):
    """HTTP client against the app with all three stores swapped for fakes."""
    app.dependency_overrides[get_document_store] = lambda: documents
    app.dependency_overrides[get_blob_store] = lambda: blobs
    app.dependency_overrides[get_session_store] = lambda: sessions
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_engine():
    """Async in-memory SQLite engine with all tables created."""
    eng = create_async_engine("sqlite+aiosqlite://", echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def async_session(async_engine):
    factory = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
