"""FastAPI dependencies wiring the files core to its stores."""
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from files_manager.config import settings
from files_manager.database import get_db
from files_manager.services.authorization import ANONYMOUS, Caller
from files_manager.services.blob_store import LocalBlobStore
from files_manager.services.document_store import SqlDocumentStore
from files_manager.services.session_store import RedisSessionStore
from files_manager.services.stores import BlobStore, DocumentStore, SessionStore


def get_document_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    return SqlDocumentStore(db)


def get_blob_store() -> BlobStore:
    # Root is read per request so FOLDER_PATH changes apply without a restart
    return LocalBlobStore(settings.FOLDER_PATH)


def get_session_store(request: Request) -> SessionStore:
    return RedisSessionStore(request.app.state.redis)


async def get_caller(
    x_token: Optional[str] = Header(None),
    sessions: SessionStore = Depends(get_session_store),
) -> Caller:
    """Resolve the X-Token header into a Caller. No token means anonymous."""
    if not x_token:
        return ANONYMOUS
    user_id = await sessions.resolve(x_token)
    return Caller(token=x_token, user_id=user_id)
