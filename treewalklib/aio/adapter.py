"""Async filesystem adapter.

Blocking filesystem calls are pushed to a worker thread with
``asyncio.to_thread`` so the event loop stays responsive while the
producer waits on I/O. Methods raise OSError on failure.
"""

import asyncio
import os
from pathlib import Path
from typing import List, Optional

from ..sync.adapter import FileSystemAdapter


class AsyncFileSystemAdapter:
    """Non-blocking wrapper around a FileSystemAdapter.

    Args:
        base_adapter: Blocking adapter doing the actual work
    """

    def __init__(self, base_adapter: Optional[FileSystemAdapter] = None):
        self.base_adapter = base_adapter or FileSystemAdapter()
        self.closed = False

    async def lstat(self, path: Path) -> os.stat_result:
        return await asyncio.to_thread(self.base_adapter.lstat, path)

    async def readlink(self, path: Path) -> str:
        return await asyncio.to_thread(self.base_adapter.readlink, path)

    async def list_names(self, path: Path) -> List[str]:
        """List a directory's child names, sorted ascending."""
        return await asyncio.to_thread(self.base_adapter.list_names, path)

    async def close(self):
        """Release adapter resources.

        Called by the walk stream once its producer stops. Subclasses
        holding handles or pools override this.
        """
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter({self.base_adapter!r})"
