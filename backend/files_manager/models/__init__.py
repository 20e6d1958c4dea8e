"""Import all models so SQLAlchemy metadata knows about them."""
from files_manager.models.base import Base
from files_manager.models.file_record import FileRecord, RecordType, ROOT_PARENT_ID

__all__ = ["Base", "FileRecord", "RecordType", "ROOT_PARENT_ID"]
