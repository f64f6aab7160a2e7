"""Configuration system for TreeWalkLib.

This module defines how users specify a traversal: whether the root
itself is reported, how deep to recurse, which relative paths to include,
and which entry types to keep.

A configuration is immutable once built. Options compose, so the two
forms below are equivalent::

    WalkerConfig(include_root=False, patterns=("dev/*", "lib"))

    WalkerConfig.from_options(
        with_skip_root(),
        with_fnmatch_patterns("dev/*", "lib"),
    )
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Tuple, Union


class FileType(Enum):
    """Closed set of entry type tags."""
    REGULAR = "regular"         # Regular file
    DIRECTORY = "directory"     # Directory
    SYMLINK = "symlink"         # Symbolic link (never followed below the root)
    OTHER = "other"             # Device, pipe, socket, ...


FileTypeLike = Union[FileType, str]


def _coerce_file_type(value: FileTypeLike) -> FileType:
    if isinstance(value, FileType):
        return value
    if isinstance(value, str):
        try:
            return FileType(value.lower())
        except ValueError:
            valid = ", ".join(t.value for t in FileType)
            raise ValueError(f"Unknown file type {value!r} (expected one of: {valid})") from None
    raise TypeError(f"File type must be FileType or str, not {type(value).__name__}")


@dataclass(frozen=True)
class WalkerConfig:
    """Complete configuration for one traversal.

    Attributes:
        include_root: Emit a descriptor for the root directory itself
        max_depth: Maximum recursion depth; negative means unlimited.
            0 and 1 behave identically (see DepthTracker).
        patterns: Shell-glob inclusion patterns matched against relative
            paths; empty means every entry passes
        file_types: Entry types to keep; empty means every type passes
    """

    include_root: bool = True
    max_depth: int = -1
    patterns: Tuple[str, ...] = ()
    file_types: FrozenSet[FileType] = field(default_factory=frozenset)

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise TypeError(f"max_depth must be an int, not {type(self.max_depth).__name__}")

        patterns = self.patterns
        if isinstance(patterns, str):
            patterns = (patterns,)
        patterns = tuple(patterns)
        for pattern in patterns:
            if not isinstance(pattern, str):
                raise TypeError(f"Patterns must be strings, got {pattern!r}")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, 'patterns', patterns)

        file_types = self.file_types
        if isinstance(file_types, (str, FileType)):
            file_types = (file_types,)
        object.__setattr__(self, 'file_types', coerce_file_types(file_types))

    @property
    def unlimited_depth(self) -> bool:
        return self.max_depth < 0

    def replace(self, **changes) -> 'WalkerConfig':
        """Return a fresh copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    # Convenience constructors

    @classmethod
    def from_options(cls, *options: 'WalkerOption') -> 'WalkerConfig':
        """Build a configuration by applying options to the defaults.

        Args:
            *options: Callables produced by the ``with_*`` helpers

        Returns:
            New WalkerConfig
        """
        config = cls()
        for option in options:
            config = option(config)
        return config

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'WalkerConfig':
        """Root plus its immediate children (by default)."""
        return cls(max_depth=max_depth)

    @classmethod
    def directories_only(cls) -> 'WalkerConfig':
        return cls(file_types=frozenset({FileType.DIRECTORY}))


WalkerOption = Callable[[WalkerConfig], WalkerConfig]


def with_skip_root() -> WalkerOption:
    """Do not emit a descriptor for the root directory."""
    def apply(config: WalkerConfig) -> WalkerConfig:
        return config.replace(include_root=False)
    return apply


def with_max_recurse_depth(max_depth: int) -> WalkerOption:
    """Limit recursion depth (negative for unlimited)."""
    def apply(config: WalkerConfig) -> WalkerConfig:
        return config.replace(max_depth=max_depth)
    return apply


def with_fnmatch_patterns(*patterns: str) -> WalkerOption:
    """Add inclusion glob patterns, keeping any already configured."""
    def apply(config: WalkerConfig) -> WalkerConfig:
        return config.replace(patterns=config.patterns + tuple(patterns))
    return apply


def with_file_types(*file_types: FileTypeLike) -> WalkerOption:
    """Add entry types to the type filter."""
    def apply(config: WalkerConfig) -> WalkerConfig:
        added = frozenset(_coerce_file_type(t) for t in file_types)
        return config.replace(file_types=config.file_types | added)
    return apply


def coerce_file_types(file_types: Iterable[FileTypeLike]) -> FrozenSet[FileType]:
    """Normalize an iterable of FileType members or names."""
    return frozenset(_coerce_file_type(t) for t in file_types)
