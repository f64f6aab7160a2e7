"""Common components shared between sync and aio implementations.

This internal package contains code that is identical between both
implementations: descriptors, classification, pattern and depth gates,
and root resolution. It should NOT be imported directly by users.

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .entry import (
    ROOT_REL_PATH,
    EntryDescriptor,
    FileInfo,
    join_rel_path,
)
from .classifier import TypeFilter, classify_mode
from .patterns import PatternMatcher
from .depth import DepthTracker
from .selection import EntrySelector
from .root import ResolvedRoot, resolve_root
from .stats import WalkStats

__all__ = [
    'ROOT_REL_PATH',
    'EntryDescriptor',
    'FileInfo',
    'join_rel_path',
    'TypeFilter',
    'classify_mode',
    'PatternMatcher',
    'DepthTracker',
    'EntrySelector',
    'ResolvedRoot',
    'resolve_root',
    'WalkStats',
]
