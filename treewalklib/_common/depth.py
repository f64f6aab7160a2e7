"""Depth limiting for traversal.

The root has depth 0 and each recursion step adds 1. For a configured
``max_depth``:

- negative: unlimited.
- 0 or 1: identical. Entries at depth 0 and 1 are reported, and only
  the root is recursed into.
- N: entries at depth <= N are reported; a directory at depth D is
  recursed into only when D < N.
"""


class DepthTracker:
    """Decides reportability and recursion by depth."""

    def __init__(self, max_depth: int = -1):
        self.max_depth = max_depth
        # 0 collapses onto 1
        self._limit = max(max_depth, 1) if max_depth >= 0 else None

    @property
    def unlimited(self) -> bool:
        return self._limit is None

    def is_reportable(self, depth: int) -> bool:
        """Check if an entry at this depth may be emitted."""
        if self._limit is None:
            return True
        return depth <= self._limit

    def should_recurse(self, depth: int) -> bool:
        """Check if a directory at this depth may be entered."""
        if self._limit is None:
            return True
        return depth < self._limit

    def __repr__(self) -> str:
        return f"DepthTracker(max_depth={self.max_depth})"
