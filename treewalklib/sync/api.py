"""High-level synchronous API for TreeWalkLib.

Simple functions for walking a filesystem tree and consuming the
resulting descriptor stream.
"""

from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from .._common.entry import EntryDescriptor
from .._common.root import resolve_root
from .._common.stats import WalkStats
from ..config import WalkerConfig
from ..error_policies import ErrorPolicy
from .adapter import FileSystemAdapter
from .traverser import PreOrderTraverser


def walk(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    *,
    cancel: Optional[Any] = None,
    error_policy: Optional[ErrorPolicy] = None,
    adapter: Optional[FileSystemAdapter] = None
) -> Iterator[EntryDescriptor]:
    """Walk a filesystem tree.

    The root is resolved immediately; the returned iterator is lazy and
    touches the filesystem only as it is consumed.

    Args:
        root: Directory, file, or symlink to either
        config: Walker configuration (defaults to WalkerConfig())
        cancel: Object with ``is_set()`` (e.g. threading.Event); once set,
            the iterator stops without starting new filesystem I/O
        error_policy: Optional observer for entries carrying errors
        adapter: Filesystem adapter (defaults to FileSystemAdapter)

    Returns:
        Iterator of EntryDescriptor in pre-order, name-sorted order

    Raises:
        RootNotFound: If the root does not exist or cannot be reached

    Example:
        >>> for entry in walk('/etc', WalkerConfig(max_depth=1)):
        ...     print(entry.rel_path)
    """
    resolved = resolve_root(root)
    traverser = PreOrderTraverser(
        config=config,
        adapter=adapter,
        cancel=cancel,
        error_policy=error_policy,
    )
    return traverser.traverse(resolved)


def collect_entries(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> List[EntryDescriptor]:
    """Walk a tree and return every descriptor as a list."""
    return list(walk(root, config, **kwargs))


def get_walk_paths(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> List[str]:
    """Walk a tree and return the relative paths in emission order."""
    return [entry.rel_path for entry in walk(root, config, **kwargs)]


def get_walk_stats(
    root: Union[str, Path],
    config: Optional[WalkerConfig] = None,
    **kwargs
) -> WalkStats:
    """Walk a tree and aggregate counts by type, errors and size."""
    stats = WalkStats()
    for entry in walk(root, config, **kwargs):
        stats.add(entry)
    return stats
