"""Async SQLAlchemy engine, session factory and schema bootstrap.

The document store wraps one session per request:
    from files_manager.database import get_db

    def get_document_store(db: AsyncSession = Depends(get_db)):
        return SqlDocumentStore(db)
"""
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from files_manager.config import settings
from files_manager.models import Base

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_size=10,
    max_overflow=20,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Create the files table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping_db() -> None:
    async with async_session() as session:
        await session.execute(text("SELECT 1"))


async def get_db():
    """FastAPI dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
