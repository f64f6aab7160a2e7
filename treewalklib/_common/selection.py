"""Emission and recursion decisions.

Combines the depth tracker, pattern matcher and type filter. Filters
decide which descriptors are emitted; recursion depends only on depth
and on the entry being a directory, so filtering never hides a subtree.
"""

from typing import Optional

from ..config import WalkerConfig
from .classifier import TypeFilter
from .depth import DepthTracker
from .entry import EntryDescriptor
from .patterns import PatternMatcher


class EntrySelector:
    """Per-traversal gate built from a WalkerConfig."""

    def __init__(self, config: Optional[WalkerConfig] = None):
        self.config = config or WalkerConfig()
        self.depth = DepthTracker(self.config.max_depth)
        self.patterns = PatternMatcher(self.config.patterns)
        self.types = TypeFilter(self.config.file_types)

    def accepts(self, entry: EntryDescriptor, depth: int, is_root: bool = False) -> bool:
        """Check whether a visited entry should be emitted.

        Args:
            entry: Descriptor of the visited node
            depth: Depth of the node (root is 0)
            is_root: Whether the node is the root directory

        Returns:
            True if the descriptor belongs in the output stream
        """
        if not self.depth.is_reportable(depth):
            return False
        # Failures stay visible regardless of filters, root included
        if entry.error is not None:
            return True
        if is_root and not self.config.include_root:
            return False
        return self.patterns.matches(entry.rel_path) and self.types.accepts(entry.file_type)

    def accepts_single_file(self, entry: EntryDescriptor) -> bool:
        """Gate for a root that is not a directory.

        Include-root and depth do not apply; filters still do.
        """
        return self.patterns.matches(entry.rel_path) and self.types.accepts(entry.file_type)

    def should_recurse(self, depth: int) -> bool:
        """Check whether a directory at this depth may be entered."""
        return self.depth.should_recurse(depth)
