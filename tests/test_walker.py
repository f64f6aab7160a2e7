"""Tests for the synchronous walker.

Exercises ordering, filtering, symlink semantics, root handling and
cancellation against the sample tree.
"""

import os
import threading
from pathlib import Path

import pytest

from treewalklib import (
    FileType,
    RootNotFound,
    WalkerConfig,
    with_fnmatch_patterns,
    with_skip_root,
)
from treewalklib.sync import collect_entries, get_walk_paths, get_walk_stats, walk
from treewalklib.testing import SAMPLE_PATHS, Symlink, build_tree


def _segments_key(path):
    return [] if path == "." else path.split("/")


class TestOrdering:

    def test_skip_root_scenario(self, sample_tree):
        rel_paths = []
        for entry in walk(sample_tree, WalkerConfig(include_root=False)):
            assert entry.error is None
            rel_paths.append(entry.rel_path)
            if entry.rel_path == "usr/bin/mv":
                assert entry.link_target == "/usr/bin/cp"

        assert rel_paths == SAMPLE_PATHS

    def test_root_is_dot(self, sample_tree):
        entries = collect_entries(sample_tree)
        assert entries[0].rel_path == "."
        assert entries[0].full_path == sample_tree
        assert entries[0].file_type is FileType.DIRECTORY
        assert [e.rel_path for e in entries[1:]] == SAMPLE_PATHS

    def test_pre_order_name_sorted(self, sample_tree):
        build_tree(sample_tree, {
            "usr/share/zoneinfo/UTC": "",
            "usr/share/Zed": "",
            "usr/share/_private": None,
            "aaa": "",
        })
        paths = get_walk_paths(sample_tree)
        assert paths == sorted(paths, key=_segments_key)
        assert len(set(paths)) == len(paths)
        # Code point order: upper case, underscore, lower case
        share = [p for p in paths if p.startswith("usr/share/") and p.count("/") == 2]
        assert share == ["usr/share/Zed", "usr/share/_private", "usr/share/zoneinfo"]

    def test_idempotent(self, sample_tree):
        config = WalkerConfig(patterns=("*/*",), max_depth=3)
        assert get_walk_paths(sample_tree, config) == get_walk_paths(sample_tree, config)

    def test_empty_directory(self, empty_dir):
        assert get_walk_paths(empty_dir) == ["."]
        assert get_walk_paths(empty_dir, WalkerConfig(include_root=False)) == []

    def test_full_paths_are_root_joined(self, sample_tree):
        for entry in walk(sample_tree, WalkerConfig(include_root=False)):
            assert entry.full_path == sample_tree.joinpath(*entry.rel_path.split("/"))

    def test_metadata_is_captured(self, sample_tree):
        entries = {e.rel_path: e for e in walk(sample_tree)}
        cp = entries["usr/bin/cp"]
        assert cp.file_info.size == len(b"#!/bin/sh\n")
        assert cp.file_info.mtime == os.lstat(sample_tree / "usr/bin/cp").st_mtime
        assert entries["usr/bin"].is_dir
        assert entries["usr/bin/mv"].file_type is FileType.SYMLINK


class TestFilters:

    def test_pattern_scenario(self, sample_tree):
        config = WalkerConfig.from_options(with_skip_root(), with_fnmatch_patterns("dev/*", "lib"))
        assert get_walk_paths(sample_tree, config) == ["dev/random", "lib"]

    def test_unmatched_directories_are_still_traversed(self, sample_tree):
        config = WalkerConfig(patterns=("etc/certs/*",))
        assert get_walk_paths(sample_tree, config) == ["etc/certs/ca.crt"]

    def test_pattern_law(self, sample_tree):
        patterns = ("*/*/*", "etc")
        config = WalkerConfig(patterns=patterns)
        everything = get_walk_paths(sample_tree)
        expected = [p for p in everything if p == "etc" or (p.count("/") == 2)]
        assert get_walk_paths(sample_tree, config) == expected

    def test_directory_type_scenario(self, sample_tree):
        config = WalkerConfig(file_types={FileType.DIRECTORY})
        assert get_walk_paths(sample_tree, config) == [
            ".", "dev", "etc", "etc/certs", "lib", "usr", "usr/bin",
        ]

    def test_symlink_type(self, sample_tree):
        config = WalkerConfig(file_types={"symlink"})
        assert get_walk_paths(sample_tree, config) == ["usr/bin/mv"]

    def test_regular_type_with_pattern(self, sample_tree):
        config = WalkerConfig(patterns=("usr/bin/*",), file_types={FileType.REGULAR})
        assert get_walk_paths(sample_tree, config) == ["usr/bin/cp"]

    def test_filters_never_reorder(self, sample_tree):
        everything = get_walk_paths(sample_tree)
        filtered = get_walk_paths(sample_tree, WalkerConfig(file_types={FileType.REGULAR}))
        assert filtered == [p for p in everything if p in set(filtered)]

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
    def test_other_type(self, sample_tree):
        os.mkfifo(sample_tree / "dev" / "pipe")
        config = WalkerConfig(file_types={FileType.OTHER})
        assert get_walk_paths(sample_tree, config) == ["dev/pipe"]

    def test_escaped_pattern_on_tree(self, empty_dir):
        build_tree(empty_dir, {"a*b": "", "axb": ""})
        config = WalkerConfig(include_root=False, patterns=(r"a\*b",))
        assert get_walk_paths(empty_dir, config) == ["a*b"]


class TestSymlinks:

    def test_non_root_symlink_to_directory_is_not_followed(self, sample_tree):
        build_tree(sample_tree, {"usr/lib64": Symlink("../lib")})
        entries = {e.rel_path: e for e in walk(sample_tree)}
        assert entries["usr/lib64"].link_target == "../lib"
        assert entries["usr/lib64"].file_type is FileType.SYMLINK
        assert not any(p.startswith("usr/lib64/") for p in entries)

    def test_dangling_symlink(self, sample_tree):
        build_tree(sample_tree, {"etc/missing": Symlink("does/not/exist")})
        entries = {e.rel_path: e for e in walk(sample_tree)}
        assert entries["etc/missing"].error is None
        assert entries["etc/missing"].link_target == "does/not/exist"

    def test_root_symlink_to_directory(self, sample_tree):
        original = sample_tree / "original"
        original.mkdir()
        (original / "original.txt").write_bytes(b"")
        # Relative link target
        os.symlink("original", sample_tree / "new")

        entries = collect_entries(sample_tree / "new")
        assert [e.rel_path for e in entries] == [".", "original.txt"]
        assert entries[0].link_target is None
        assert entries[0].file_type is FileType.DIRECTORY
        assert entries[0].full_path == Path(os.path.realpath(original))

    def test_root_symlink_matches_direct_walk(self, sample_tree, empty_dir):
        link = empty_dir / "tree"
        os.symlink(sample_tree, link)
        config = WalkerConfig(max_depth=2)
        assert get_walk_paths(link, config) == get_walk_paths(sample_tree, config)


class TestRoot:

    def test_single_file_root(self, sample_tree):
        entries = collect_entries(sample_tree / "usr" / "bin" / "cp")
        assert [e.rel_path for e in entries] == ["cp"]
        assert entries[0].file_type is FileType.REGULAR

    def test_single_file_ignores_root_and_depth_options(self, sample_tree):
        config = WalkerConfig(include_root=False, max_depth=0)
        assert get_walk_paths(sample_tree / "etc" / "hostname", config) == ["hostname"]

    def test_root_symlink_to_file(self, sample_tree):
        os.symlink(sample_tree / "usr" / "bin" / "cp", sample_tree / "cp-link")
        entries = collect_entries(sample_tree / "cp-link")
        assert [e.rel_path for e in entries] == ["cp"]
        assert entries[0].link_target is None

    def test_missing_root_raises_immediately(self, sample_tree):
        with pytest.raises(RootNotFound) as exc_info:
            walk(sample_tree / "doesntlivehere")
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.path == sample_tree / "doesntlivehere"

    def test_dangling_root_symlink(self, sample_tree):
        os.symlink("nowhere", sample_tree / "dangling")
        with pytest.raises(RootNotFound):
            walk(sample_tree / "dangling")


class TestCancellation:

    def test_cancel_stops_stream(self, sample_tree, faulty_adapter_cls):
        cancel = threading.Event()
        adapter = faulty_adapter_cls()
        received = []

        for entry in walk(sample_tree, cancel=cancel, adapter=adapter):
            received.append(entry.rel_path)
            if len(received) == 3:
                calls_at_cancel = len(adapter.calls)
                cancel.set()

        assert received == ([".", *SAMPLE_PATHS])[:3]
        # No new filesystem I/O once cancellation was observed
        assert len(adapter.calls) == calls_at_cancel

    def test_cancel_before_start(self, sample_tree):
        cancel = threading.Event()
        cancel.set()
        assert list(walk(sample_tree, cancel=cancel)) == []

    def test_cancel_does_not_mask_missing_root(self, sample_tree):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(RootNotFound):
            walk(sample_tree / "nope", cancel=cancel)

    def test_is_lazy(self, sample_tree, faulty_adapter_cls):
        adapter = faulty_adapter_cls()
        iterator = walk(sample_tree, adapter=adapter)
        assert adapter.calls == []
        next(iterator)
        # Only the root listing is needed for the first descriptor
        assert adapter.calls == [("list_names", sample_tree)]


class TestStats:

    def test_walk_stats(self, sample_tree):
        stats = get_walk_stats(sample_tree)
        assert stats.total == 13
        assert stats.directories == 7
        assert stats.files == 5
        assert stats.symlinks == 1
        assert stats.errors == 0
        assert stats.total_size == sum(
            (sample_tree / p).stat().st_size
            for p in ("dev/random", "etc/hostname", "etc/certs/ca.crt", "lib/dynalib.so", "usr/bin/cp")
        )
        assert stats.as_dict()["directory"] == 7
