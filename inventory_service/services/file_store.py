"""
Local photo storage for registered items.

Uploads are written to the cache directory as ``<epoch-millis><extension>``.
Two uploads with the same extension in the same millisecond share a name and
the later one wins.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import aiofiles
import aiofiles.os


LOG = logging.getLogger(__name__)


def stored_name_for(original_filename: str, now_ms: int | None = None) -> str:
    """Build the stored filename: millisecond timestamp plus the original extension."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{now_ms}{Path(original_filename).suffix}"


class FileStore:
    """Photo files kept in one flat directory."""

    def __init__(self, root_dir: str | Path) -> None:
        self.root = Path(root_dir)

    def ensure_directory(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    async def store(self, content: bytes, original_filename: str) -> str:
        """Write an uploaded blob and return its stored name."""
        name = stored_name_for(original_filename)
        async with aiofiles.open(self.root / name, mode="wb") as f:
            await f.write(content)
        LOG.info("photo stored name=%s bytes=%d", name, len(content))
        return name

    def _resolve(self, stored_name: str | None) -> Path | None:
        if not stored_name:
            return None
        path = (self.root / stored_name).resolve()
        if path.parent != self.root.resolve():
            return None
        return path

    async def retrieve(self, stored_name: str | None) -> Path | None:
        """Return the path of a stored file, or None if there is no such file."""
        path = self._resolve(stored_name)
        if path is None or not await aiofiles.os.path.isfile(path):
            return None
        return path

    async def discard(self, stored_name: str | None) -> bool:
        """Remove a stored file. Returns True if it existed."""
        path = await self.retrieve(stored_name)
        if path is None:
            return False
        await aiofiles.os.remove(path)
        LOG.info("photo discarded name=%s", stored_name)
        return True
