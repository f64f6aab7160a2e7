"""
Error handling policies for TreeWalkLib.

Per-entry failures are always carried on the descriptor itself. A policy
is an optional observer the walker consults for every emitted descriptor
that carries an error, letting callers collect, report, or escalate
failures without inspecting each entry themselves.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ._common.entry import EntryDescriptor
from .errors import WalkerError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    attached to entries during traversal.
    """

    @abstractmethod
    def handle_sync(self, error: WalkerError, entry: EntryDescriptor) -> None:
        """
        Handle an error attached to an entry.

        Args:
            error: The per-entry error (EntryMetadataError, DirectoryListError)
            entry: The descriptor carrying the error

        Raising from here ends the traversal; the exception reaches the
        consumer in place of the remaining entries.
        """

    async def handle(self, error: WalkerError, entry: EntryDescriptor) -> None:
        """Async entry point used by the aio walker."""
        self.handle_sync(error, entry)


def _error_record(error: WalkerError, entry: EntryDescriptor) -> Dict[str, Any]:
    return {
        'path': entry.full_path,
        'rel_path': entry.rel_path,
        'error': error,
        'error_type': type(error).__name__,
        'cause_type': type(error.cause).__name__ if error.cause is not None else None,
        'error_message': str(error),
    }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    Useful when partial results are not acceptable, e.g. when building an
    archive that must contain every entry.
    """

    def handle_sync(self, error: WalkerError, entry: EntryDescriptor) -> None:
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without printing, for batch processing.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[Any] = []

    def handle_sync(self, error: WalkerError, entry: EntryDescriptor) -> None:
        self.errors.append(_error_record(error, entry))
        if isinstance(error.cause, PermissionError):
            self.skipped_paths.append(entry.full_path)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'metadata_errors': sum(1 for e in self.errors if e['error_type'] == 'EntryMetadataError'),
            'list_errors': sum(1 for e in self.errors if e['error_type'] == 'DirectoryListError'),
            'permission_errors': sum(1 for e in self.errors if e['cause_type'] == 'PermissionError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that records errors, warns on stderr, and continues traversal.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    def handle_sync(self, error: WalkerError, entry: EntryDescriptor) -> None:
        super().handle_sync(error, entry)

        if self.verbose:
            if isinstance(error.cause, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path '{entry.full_path}': {error.cause}",
                      file=sys.stderr)
            else:
                print(f"\nWARNING: {error}", file=sys.stderr)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[WalkerError] = []

    def handle_sync(self, error: WalkerError, entry: EntryDescriptor) -> None:
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        return {
            'total_errors': self.error_count,
            'max_errors': self.max_errors,
            'exceeded': self.error_count > self.max_errors,
        }
