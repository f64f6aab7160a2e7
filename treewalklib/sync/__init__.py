"""Synchronous implementation of TreeWalkLib.

The walker is a plain generator: the producer runs only while the
consumer pulls, which gives backpressure for free.
"""

from .adapter import FileSystemAdapter
from .traverser import PreOrderTraverser
from .api import (
    walk,
    collect_entries,
    get_walk_paths,
    get_walk_stats,
)

__all__ = [
    'FileSystemAdapter',
    'PreOrderTraverser',
    'walk',
    'collect_entries',
    'get_walk_paths',
    'get_walk_stats',
]
