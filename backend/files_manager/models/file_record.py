"""FileRecord model - folder/file metadata (actual bytes live in the blob store)."""
import enum
import uuid
from sqlalchemy import String, Text, Boolean, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from files_manager.models.base import Base, TimestampMixin, OwnerMixin

# parent_id of a top-level record
ROOT_PARENT_ID = "0"


class RecordType(str, enum.Enum):
    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"


class FileRecord(Base, TimestampMixin, OwnerMixin):
    __tablename__ = "files"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    parent_id: Mapped[str] = mapped_column(String(36), nullable=False, default=ROOT_PARENT_ID)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    local_path: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    __table_args__ = (
        Index("idx_files_user_parent", "user_id", "parent_id"),
    )

    @property
    def is_folder(self) -> bool:
        return self.type == RecordType.FOLDER.value
