"""File request/response schemas."""
from typing import Any, Union
from files_manager.schemas.base import CamelModel, CamelORMModel


class FileCreate(CamelModel):
    """Upload body. Fields are untyped so any JSON shape is accepted here;
    the hierarchy manager checks them in a fixed order after authentication
    so clients get one precise error."""
    name: Any = None
    type: Any = None
    parent_id: Any = None
    is_public: Any = False
    data: Any = None


class FileResponse(CamelORMModel):
    id: str
    user_id: str
    name: str
    type: str
    is_public: bool
    parent_id: Union[int, str]  # 0 for top-level records
