"""Aggregate statistics over a descriptor stream."""

from dataclasses import dataclass, field
from typing import Dict

from ..config import FileType
from .entry import EntryDescriptor


@dataclass
class WalkStats:
    """Counts gathered while consuming a walk.

    ``total_size`` sums regular files only.
    """

    total: int = 0
    errors: int = 0
    total_size: int = 0
    by_type: Dict[FileType, int] = field(default_factory=lambda: {t: 0 for t in FileType})

    def add(self, entry: EntryDescriptor) -> None:
        self.total += 1
        if entry.error is not None:
            self.errors += 1
        file_type = entry.file_type
        if file_type is not None:
            self.by_type[file_type] += 1
            if file_type is FileType.REGULAR:
                self.total_size += entry.file_info.size

    @property
    def files(self) -> int:
        return self.by_type[FileType.REGULAR]

    @property
    def directories(self) -> int:
        return self.by_type[FileType.DIRECTORY]

    @property
    def symlinks(self) -> int:
        return self.by_type[FileType.SYMLINK]

    def as_dict(self) -> Dict[str, int]:
        return {
            'total': self.total,
            'errors': self.errors,
            'total_size': self.total_size,
            **{t.value: count for t, count in self.by_type.items()},
        }
