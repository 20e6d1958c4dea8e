"""Blob storage on the local filesystem.

Bytes are written to ``<root>/<blob id>``; the returned path is what the
document store keeps as ``local_path``.
"""
from pathlib import Path

import aiofiles
import aiofiles.os

from files_manager.config import settings


class LocalBlobStore:
    """Handles blob read/write under a storage root directory."""

    def __init__(self, root: str | None = None):
        self.root = Path(root or settings.FOLDER_PATH)

    async def ensure_root(self) -> None:
        """Create the storage root (and parents) if it does not exist yet."""
        await aiofiles.os.makedirs(self.root, exist_ok=True)

    def path_for(self, blob_id: str) -> str:
        return str(self.root / blob_id)

    async def exists(self, path: str) -> bool:
        return await aiofiles.os.path.isfile(path)

    async def write(self, path: str, data: bytes) -> None:
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)

    async def read(self, path: str) -> bytes:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()
