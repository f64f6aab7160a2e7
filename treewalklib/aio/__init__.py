"""Asynchronous implementation of TreeWalkLib.

A single producer task per traversal feeds a bounded queue; blocking
filesystem calls run in worker threads via ``asyncio.to_thread``.
"""

from .adapter import AsyncFileSystemAdapter
from .traverser import AsyncPreOrderTraverser
from .stream import EntryStream
from .api import (
    walk,
    collect_entries_async,
    get_walk_paths_async,
    get_walk_stats_async,
)

__all__ = [
    'AsyncFileSystemAdapter',
    'AsyncPreOrderTraverser',
    'EntryStream',
    'walk',
    'collect_entries_async',
    'get_walk_paths_async',
    'get_walk_stats_async',
]
