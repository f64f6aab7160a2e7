"""Traversal root resolution.

The root is the only place where symlinks are followed. A symlink root
is replaced by its fully resolved target before traversal begins, so
the traversal behaves exactly as if the target had been given.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..errors import RootNotFound
from .entry import FileInfo


@dataclass(frozen=True)
class ResolvedRoot:
    """Outcome of resolving a traversal root.

    Attributes:
        requested: Path as given by the caller
        path: Path traversal proceeds from (symlinks resolved)
        file_info: Stat of the resolved target
        was_symlink: Whether ``requested`` was a symlink
    """

    requested: Path
    path: Path
    file_info: FileInfo
    was_symlink: bool = False

    @property
    def is_dir(self) -> bool:
        return self.file_info.is_dir

    @property
    def name(self) -> str:
        return self.file_info.name


def resolve_root(root: Union[str, Path, os.PathLike]) -> ResolvedRoot:
    """Resolve the traversal root, following symlinks at this level only.

    Args:
        root: Directory, file or symlink to start from

    Returns:
        ResolvedRoot describing the target

    Raises:
        RootNotFound: If the root does not exist or cannot be stat'ed
    """
    requested = Path(os.fspath(root))

    try:
        st = os.stat(requested)
        was_symlink = os.path.islink(requested)
    except OSError as e:
        raise RootNotFound(requested, e) from e

    path = Path(os.path.realpath(requested)) if was_symlink else requested
    name = path.name or str(path)
    return ResolvedRoot(
        requested=requested,
        path=path,
        file_info=FileInfo.from_stat(name, st),
        was_symlink=was_symlink,
    )
