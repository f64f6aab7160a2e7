"""Synchronous pre-order traversal.

Walks a resolved root depth-first, visiting siblings in ascending name
order and yielding one EntryDescriptor per emitted node. The generator
suspends on every yield, so the consumer's pace bounds the producer and
no more than one directory listing per level is held in memory.
"""

from pathlib import Path
from typing import Any, Iterator, List, Optional

from .._common.entry import ROOT_REL_PATH, EntryDescriptor, FileInfo, join_rel_path
from .._common.root import ResolvedRoot
from .._common.selection import EntrySelector
from ..config import FileType, WalkerConfig
from ..error_policies import ErrorPolicy
from ..errors import DirectoryListError, EntryMetadataError
from .adapter import FileSystemAdapter


class PreOrderTraverser:
    """Depth-first, pre-order, name-sorted traversal.

    Args:
        config: Walker configuration
        adapter: Filesystem access (defaults to FileSystemAdapter)
        cancel: Object with ``is_set()``; checked between node visits
        error_policy: Optional observer for entries carrying errors
    """

    def __init__(
        self,
        config: Optional[WalkerConfig] = None,
        adapter: Optional[FileSystemAdapter] = None,
        cancel: Optional[Any] = None,
        error_policy: Optional[ErrorPolicy] = None
    ):
        self.config = config or WalkerConfig()
        self.selector = EntrySelector(self.config)
        self.adapter = adapter or FileSystemAdapter()
        self.cancel = cancel
        self.error_policy = error_policy

    def cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()

    def traverse(self, root: ResolvedRoot) -> Iterator[EntryDescriptor]:
        """Yield descriptors for the resolved root and its subtree."""
        if self.cancelled():
            return

        if not root.is_dir:
            # Single file: named by its base name, include-root/depth ignored
            entry = EntryDescriptor(
                rel_path=root.name,
                full_path=root.path,
                file_info=root.file_info,
            )
            if self.selector.accepts_single_file(entry):
                yield entry
            return

        yield from self._visit_directory(root.path, ROOT_REL_PATH, 0, root.file_info, is_root=True)

    def _visit(self, full_path: Path, rel_path: str, depth: int) -> Iterator[EntryDescriptor]:
        """Visit one non-root node."""
        try:
            st = self.adapter.lstat(full_path)
        except OSError as e:
            entry = EntryDescriptor(
                rel_path=rel_path,
                full_path=full_path,
                error=EntryMetadataError(full_path, e),
            )
            yield from self._emit(entry, depth)
            return

        info = FileInfo.from_stat(full_path.name, st)

        if info.file_type is FileType.DIRECTORY:
            yield from self._visit_directory(full_path, rel_path, depth, info)
            return

        entry = EntryDescriptor(rel_path=rel_path, full_path=full_path, file_info=info)
        if info.file_type is FileType.SYMLINK:
            # Never followed below the root
            try:
                entry.link_target = self.adapter.readlink(full_path)
            except OSError as e:
                entry.error = EntryMetadataError(full_path, e)

        yield from self._emit(entry, depth)

    def _visit_directory(
        self,
        full_path: Path,
        rel_path: str,
        depth: int,
        info: FileInfo,
        is_root: bool = False
    ) -> Iterator[EntryDescriptor]:
        """Visit a directory: list it (if allowed), emit it, then its children."""
        entry = EntryDescriptor(rel_path=rel_path, full_path=full_path, file_info=info)

        names: List[str] = []
        if self.selector.should_recurse(depth):
            if self.cancelled():
                return
            try:
                names = self.adapter.list_names(full_path)
            except OSError as e:
                entry.error = DirectoryListError(full_path, e)

        yield from self._emit(entry, depth, is_root)

        for name in names:
            if self.cancelled():
                return
            yield from self._visit(full_path / name, join_rel_path(rel_path, name), depth + 1)

    def _emit(self, entry: EntryDescriptor, depth: int, is_root: bool = False) -> Iterator[EntryDescriptor]:
        if not self.selector.accepts(entry, depth, is_root):
            return
        if entry.error is not None and self.error_policy is not None:
            self.error_policy.handle_sync(entry.error, entry)
        yield entry
