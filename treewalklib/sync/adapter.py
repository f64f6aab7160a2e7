"""Filesystem adapter for the synchronous walker.

The adapter is the only place the sync walker touches the filesystem.
Every method raises OSError on failure; the traverser turns those into
per-entry errors. Subclass it to serve a different tree or to inject
faults in tests.
"""

import os
from pathlib import Path
from typing import List


class FileSystemAdapter:
    """Blocking filesystem access used by PreOrderTraverser."""

    def lstat(self, path: Path) -> os.stat_result:
        """Stat an entry without following symlinks."""
        return os.lstat(path)

    def readlink(self, path: Path) -> str:
        """Return the raw, unresolved target text of a symlink."""
        return os.readlink(path)

    def list_names(self, path: Path) -> List[str]:
        """List the names of a directory's children, sorted ascending.

        Only the names are read here; each child is stat'ed when it is
        visited so failures are attributed to the child itself.
        """
        with os.scandir(path) as iterator:
            names = [entry.name for entry in iterator]
        names.sort()
        return names

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
