"""High-level async API for TreeWalkLib.

``walk()`` resolves the root, starts one producer task and hands back an
EntryStream. The helpers below consume a whole stream for common needs.
"""

import asyncio
from pathlib import Path
from typing import Any, List, Optional, Union

from .._common.entry import EntryDescriptor
from .._common.root import resolve_root
from .._common.stats import WalkStats
from ..config import WalkerConfig
from ..error_policies import ErrorPolicy
from ..sync.adapter import FileSystemAdapter
from .adapter import AsyncFileSystemAdapter
from .stream import EntryStream
from .traverser import AsyncPreOrderTraverser


async def walk(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    *,
    cancel: Optional[Any] = None,
    error_policy: Optional[ErrorPolicy] = None,
    adapter: Optional[Union[AsyncFileSystemAdapter, FileSystemAdapter]] = None,
    buffer_size: int = 1
) -> EntryStream:
    """Walk a filesystem tree asynchronously.

    Args:
        root: Directory, file, or symlink to either
        config: Walker configuration (defaults to WalkerConfig())
        cancel: Object with ``is_set()`` (asyncio.Event, threading.Event);
            once set, the producer stops and the stream ends
        error_policy: Optional observer for entries carrying errors
        adapter: Async adapter, or a sync FileSystemAdapter to wrap. The
            stream closes the async adapter once its producer stops
        buffer_size: Capacity of the descriptor queue

    Returns:
        Running EntryStream of descriptors in pre-order, name-sorted order

    Raises:
        RootNotFound: If the root does not exist or cannot be reached

    Example:
        >>> async with await walk('/etc', WalkerConfig(max_depth=1)) as stream:
        ...     async for entry in stream:
        ...         print(entry.rel_path)
    """
    resolved = await asyncio.to_thread(resolve_root, root)

    if adapter is None or isinstance(adapter, FileSystemAdapter):
        adapter = AsyncFileSystemAdapter(adapter)

    traverser = AsyncPreOrderTraverser(
        config=config,
        adapter=adapter,
        cancel=cancel,
        error_policy=error_policy,
    )
    return EntryStream(
        traverser.traverse(resolved),
        buffer_size=buffer_size,
        on_close=adapter.close,
    )


async def collect_entries_async(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> List[EntryDescriptor]:
    """Walk a tree and return every descriptor as a list."""
    entries = []
    async with await walk(root, config, **kwargs) as stream:
        async for entry in stream:
            entries.append(entry)
    return entries


async def get_walk_paths_async(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> List[str]:
    """Walk a tree and return the relative paths in emission order."""
    entries = await collect_entries_async(root, config, **kwargs)
    return [entry.rel_path for entry in entries]


async def get_walk_stats_async(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> WalkStats:
    """Walk a tree and aggregate counts by type, errors and size."""
    stats = WalkStats()
    async with await walk(root, config, **kwargs) as stream:
        async for entry in stream:
            stats.add(entry)
    return stats
