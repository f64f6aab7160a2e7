"""Entry descriptors produced by the walker.

A descriptor carries everything a downstream consumer (an archiver, a
packager) needs without touching the filesystem again: relative and
full paths, the stat snapshot taken at visit time, the raw link text of
non-root symlinks, and any per-entry error.
"""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ..config import FileType
from .classifier import classify_mode

if TYPE_CHECKING:
    from ..errors import WalkerError


ROOT_REL_PATH = "."


@dataclass(frozen=True)
class FileInfo:
    """Stat snapshot of one entry."""

    name: str
    size: int
    mode: int
    mtime: float
    file_type: FileType

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> 'FileInfo':
        return cls(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            mtime=st.st_mtime,
            file_type=classify_mode(st.st_mode),
        )

    @property
    def permissions(self) -> int:
        """Permission bits (``stat.S_IMODE``)."""
        return stat.S_IMODE(self.mode)

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY


@dataclass
class EntryDescriptor:
    """One visited filesystem node.

    Attributes:
        rel_path: ``/``-separated path relative to the root; ``.`` for the
            root directory, the base name for a single-file root
        full_path: Root-joined path usable for further I/O
        file_info: Stat snapshot, None when metadata could not be read
        link_target: Raw link text, only for symlinks below the root
        error: Per-entry failure, if any
    """

    rel_path: str
    full_path: Path
    file_info: Optional[FileInfo] = None
    link_target: Optional[str] = None
    error: Optional['WalkerError'] = None

    @property
    def file_type(self) -> Optional[FileType]:
        return self.file_info.file_type if self.file_info is not None else None

    @property
    def is_dir(self) -> bool:
        return self.file_info is not None and self.file_info.is_dir

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def depth(self) -> int:
        """Depth below a directory root (root is 0).

        Derived from rel_path, so a single-file root reports 1.
        """
        if self.rel_path == ROOT_REL_PATH:
            return 0
        return self.rel_path.count('/') + 1

    def __repr__(self) -> str:
        extra = ""
        if self.link_target is not None:
            extra += f" -> {self.link_target}"
        if self.error is not None:
            extra += f" error={self.error.__class__.__name__}"
        return f"EntryDescriptor({self.rel_path!r}{extra})"


def join_rel_path(parent: str, name: str) -> str:
    """Join a child name onto a relative path, keeping ``.`` out of it."""
    if parent == ROOT_REL_PATH:
        return name
    return f"{parent}/{name}"
