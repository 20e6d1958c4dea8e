"""SQL-backed document store for FileRecord metadata."""
import uuid
from typing import Any, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from files_manager.models.file_record import FileRecord


class SqlDocumentStore:
    """Document store over the ``files`` table, bound to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert_one(self, values: dict[str, Any]) -> FileRecord:
        record = FileRecord(**values)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def find_one(self, **criteria: Any) -> Optional[FileRecord]:
        # populate_existing so a re-read after update_one sees the new row
        result = await self.db.execute(
            select(FileRecord)
            .filter_by(**criteria)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def find_many(
        self, criteria: dict[str, Any], skip: int = 0, limit: Optional[int] = None
    ) -> Sequence[FileRecord]:
        query = select(FileRecord).filter_by(**criteria).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return result.scalars().all()

    async def update_one(self, record_id: uuid.UUID, values: dict[str, Any]) -> None:
        await self.db.execute(
            update(FileRecord).where(FileRecord.id == record_id).values(**values)
        )
        await self.db.commit()
