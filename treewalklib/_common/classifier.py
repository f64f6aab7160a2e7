"""Entry classification.

Maps raw ``st_mode`` bits onto the closed FileType set and applies the
optional type filter.
"""

import stat
from typing import Iterable, Optional

from ..config import FileType, FileTypeLike, coerce_file_types


def classify_mode(mode: int) -> FileType:
    """Classify a stat mode into exactly one FileType.

    Args:
        mode: ``st_mode`` from stat/lstat

    Returns:
        Matching FileType (OTHER for devices, pipes, sockets, ...)
    """
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER


class TypeFilter:
    """Keeps entries whose type is in the configured set.

    An empty set keeps everything.
    """

    def __init__(self, file_types: Iterable[FileTypeLike] = ()):
        self.file_types = coerce_file_types(file_types)

    @property
    def active(self) -> bool:
        return bool(self.file_types)

    def accepts(self, file_type: Optional[FileType]) -> bool:
        if not self.file_types:
            return True
        return file_type in self.file_types

    def __repr__(self) -> str:
        names = sorted(t.value for t in self.file_types)
        return f"TypeFilter({names})"
