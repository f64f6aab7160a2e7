"""Shared fixtures for TreeWalkLib tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from treewalklib.sync import FileSystemAdapter
from treewalklib.testing import build_tree


@pytest.fixture
def sample_tree():
    """Create the sample tree used across the suite.

    Structure:
        root/
        ├── dev/random
        ├── etc/
        │   ├── certs/ca.crt
        │   └── hostname
        ├── lib/dynalib.so
        └── usr/bin/
            ├── cp
            └── mv -> /usr/bin/cp
    """
    test_dir = tempfile.mkdtemp(prefix="treewalk_test_")
    yield build_tree(test_dir)
    shutil.rmtree(test_dir, ignore_errors=True)


@pytest.fixture
def empty_dir():
    test_dir = tempfile.mkdtemp(prefix="treewalk_empty_")
    yield Path(test_dir)
    shutil.rmtree(test_dir, ignore_errors=True)


class FaultyAdapter(FileSystemAdapter):
    """Adapter raising PermissionError for chosen entry names.

    Runs fine as root, unlike chmod-based permission tests.
    """

    def __init__(self, fail_lstat=(), fail_list=(), fail_readlink=()):
        self.fail_lstat = set(fail_lstat)
        self.fail_list = set(fail_list)
        self.fail_readlink = set(fail_readlink)
        self.calls = []

    def _maybe_fail(self, path, names):
        if path.name in names:
            raise PermissionError(13, "Permission denied", str(path))

    def lstat(self, path):
        self.calls.append(('lstat', path))
        self._maybe_fail(path, self.fail_lstat)
        return super().lstat(path)

    def readlink(self, path):
        self.calls.append(('readlink', path))
        self._maybe_fail(path, self.fail_readlink)
        return super().readlink(path)

    def list_names(self, path):
        self.calls.append(('list_names', path))
        self._maybe_fail(path, self.fail_list)
        return super().list_names(path)


@pytest.fixture
def faulty_adapter_cls():
    return FaultyAdapter
