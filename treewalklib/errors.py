"""Error taxonomy for TreeWalkLib.

Only root resolution failures are raised to the caller. Every other
failure is attached to the descriptor of the entry it concerns, so a
consumer can decide per entry whether to abort, skip, or log.
"""

from pathlib import Path
from typing import Optional, Union


class WalkerError(Exception):
    """Base class for all walker errors.

    Attributes:
        path: Filesystem path the error refers to
        cause: Underlying OSError, if any
    """

    def __init__(
        self,
        path: Union[str, Path],
        cause: Optional[BaseException] = None,
        message: Optional[str] = None
    ):
        self.path = Path(path)
        self.cause = cause
        if message is None:
            message = f"{self.describe()}: {path}"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def errno(self) -> Optional[int]:
        """errno of the underlying OSError, or None."""
        return getattr(self.cause, 'errno', None)

    def describe(self) -> str:
        return "walker error"


class RootNotFound(WalkerError):
    """The traversal root does not exist or cannot be reached.

    Raised synchronously by ``walk()``; no stream is produced.
    """

    def describe(self) -> str:
        return "traversal root not found"


class EntryMetadataError(WalkerError):
    """Metadata (lstat or readlink) of a single entry could not be read."""

    def describe(self) -> str:
        return "cannot read entry metadata"


class DirectoryListError(WalkerError):
    """Children of a directory could not be enumerated."""

    def describe(self) -> str:
        return "cannot list directory"
