"""Testing utilities for TreeWalkLib consumers."""

from .fixtures import SAMPLE_LAYOUT, SAMPLE_PATHS, Symlink, build_tree

__all__ = ['SAMPLE_LAYOUT', 'SAMPLE_PATHS', 'Symlink', 'build_tree']
