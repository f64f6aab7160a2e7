"""TreeWalkLib - Filesystem tree walker for archive and packaging pipelines.

Turns a directory subtree (or a single file, or a symlink to either) into
an ordered, lazily produced stream of entry descriptors carrying enough
metadata for a downstream archiver to work without touching the
filesystem again.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from treewalklib.sync import walk

Asynchronous:
    from treewalklib.aio import walk
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both walkers emit descriptors in the same pre-order, name-sorted order
and honour the same WalkerConfig.
"""

__version__ = "0.3.0"

from . import sync
from . import aio
from ._common.entry import EntryDescriptor, FileInfo
from ._common.stats import WalkStats
from .config import (
    FileType,
    WalkerConfig,
    with_skip_root,
    with_max_recurse_depth,
    with_fnmatch_patterns,
    with_file_types,
)
from .errors import (
    WalkerError,
    RootNotFound,
    EntryMetadataError,
    DirectoryListError,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)

__all__ = [
    "__version__",
    "sync",
    "aio",
    # Descriptors
    "EntryDescriptor",
    "FileInfo",
    "WalkStats",
    # Configuration
    "FileType",
    "WalkerConfig",
    "with_skip_root",
    "with_max_recurse_depth",
    "with_fnmatch_patterns",
    "with_file_types",
    # Errors
    "WalkerError",
    "RootNotFound",
    "EntryMetadataError",
    "DirectoryListError",
    # Error policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
]
