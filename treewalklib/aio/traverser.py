"""Async pre-order traversal.

Same ordering and gating rules as the sync traverser, with every
filesystem call awaited through an AsyncFileSystemAdapter. Uses
recursion with async generators for streaming.
"""

from pathlib import Path
from typing import Any, AsyncIterator, List, Optional

from .._common.entry import ROOT_REL_PATH, EntryDescriptor, FileInfo, join_rel_path
from .._common.root import ResolvedRoot
from .._common.selection import EntrySelector
from ..config import FileType, WalkerConfig
from ..error_policies import ErrorPolicy
from ..errors import DirectoryListError, EntryMetadataError
from .adapter import AsyncFileSystemAdapter


class AsyncPreOrderTraverser:
    """Async depth-first, pre-order, name-sorted traversal.

    Args:
        config: Walker configuration
        adapter: Async filesystem access (defaults to AsyncFileSystemAdapter)
        cancel: Object with ``is_set()``; checked between node visits
        error_policy: Optional observer for entries carrying errors
    """

    def __init__(
        self,
        config: Optional[WalkerConfig] = None,
        adapter: Optional[AsyncFileSystemAdapter] = None,
        cancel: Optional[Any] = None,
        error_policy: Optional[ErrorPolicy] = None
    ):
        self.config = config or WalkerConfig()
        self.selector = EntrySelector(self.config)
        self.adapter = adapter or AsyncFileSystemAdapter()
        self.cancel = cancel
        self.error_policy = error_policy

    def cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()

    async def traverse(self, root: ResolvedRoot) -> AsyncIterator[EntryDescriptor]:
        """Yield descriptors for the resolved root and its subtree."""
        if self.cancelled():
            return

        if not root.is_dir:
            entry = EntryDescriptor(
                rel_path=root.name,
                full_path=root.path,
                file_info=root.file_info,
            )
            if self.selector.accepts_single_file(entry):
                yield entry
            return

        async for entry in self._visit_directory(
            root.path, ROOT_REL_PATH, 0, root.file_info, is_root=True
        ):
            yield entry

    async def _visit(self, full_path: Path, rel_path: str, depth: int) -> AsyncIterator[EntryDescriptor]:
        try:
            st = await self.adapter.lstat(full_path)
        except OSError as e:
            entry = EntryDescriptor(
                rel_path=rel_path,
                full_path=full_path,
                error=EntryMetadataError(full_path, e),
            )
            if await self._accept(entry, depth):
                yield entry
            return

        info = FileInfo.from_stat(full_path.name, st)

        if info.file_type is FileType.DIRECTORY:
            async for entry in self._visit_directory(full_path, rel_path, depth, info):
                yield entry
            return

        entry = EntryDescriptor(rel_path=rel_path, full_path=full_path, file_info=info)
        if info.file_type is FileType.SYMLINK:
            try:
                entry.link_target = await self.adapter.readlink(full_path)
            except OSError as e:
                entry.error = EntryMetadataError(full_path, e)

        if await self._accept(entry, depth):
            yield entry

    async def _visit_directory(
        self,
        full_path: Path,
        rel_path: str,
        depth: int,
        info: FileInfo,
        is_root: bool = False
    ) -> AsyncIterator[EntryDescriptor]:
        entry = EntryDescriptor(rel_path=rel_path, full_path=full_path, file_info=info)

        names: List[str] = []
        if self.selector.should_recurse(depth):
            if self.cancelled():
                return
            try:
                names = await self.adapter.list_names(full_path)
            except OSError as e:
                entry.error = DirectoryListError(full_path, e)

        if await self._accept(entry, depth, is_root):
            yield entry

        for name in names:
            if self.cancelled():
                return
            async for child in self._visit(full_path / name, join_rel_path(rel_path, name), depth + 1):
                yield child

    async def _accept(self, entry: EntryDescriptor, depth: int, is_root: bool = False) -> bool:
        """Apply the selector and notify the error policy for emitted failures."""
        if not self.selector.accepts(entry, depth, is_root):
            return False
        if entry.error is not None and self.error_policy is not None:
            await self.error_policy.handle(entry.error, entry)
        return True
