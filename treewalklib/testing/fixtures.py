"""Test fixtures for TreeWalkLib consumers.

Helpers for materializing small directory trees in a temporary
location, so walker behaviour can be asserted against known layouts.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class Symlink:
    """Layout value creating a symlink with the given raw target."""
    target: str


# A directory is given as None, a file as its content
LayoutValue = Optional[Union[str, bytes, Symlink]]


SAMPLE_LAYOUT: Dict[str, LayoutValue] = {
    "dev": None,
    "dev/random": b"\x00\x01\x02\x03",
    "etc": None,
    "etc/hostname": "localhost\n",
    "etc/certs": None,
    "etc/certs/ca.crt": "-----BEGIN CERTIFICATE-----\n",
    "lib": None,
    "lib/dynalib.so": b"\x7fELF",
    "usr": None,
    "usr/bin": None,
    "usr/bin/cp": b"#!/bin/sh\n",
    "usr/bin/mv": Symlink("/usr/bin/cp"),
}


SAMPLE_PATHS = [
    "dev", "dev/random",
    "etc", "etc/certs", "etc/certs/ca.crt", "etc/hostname",
    "lib", "lib/dynalib.so",
    "usr", "usr/bin", "usr/bin/cp", "usr/bin/mv",
]


def build_tree(root: Union[str, Path], layout: Dict[str, LayoutValue] = None) -> Path:
    """Create a tree under ``root`` from a ``{rel_path: value}`` layout.

    Parent directories are created as needed, so entries may be listed
    in any order.

    Args:
        root: Existing directory to populate
        layout: Mapping of ``/``-separated paths to None (directory),
            str/bytes (file content) or Symlink (link target)

    Returns:
        The root as a Path
    """
    root = Path(root)
    if layout is None:
        layout = SAMPLE_LAYOUT

    for rel_path, value in layout.items():
        target = root.joinpath(*rel_path.split("/"))
        if value is None:
            target.mkdir(parents=True, exist_ok=True)
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(value, Symlink):
            os.symlink(value.target, target)
        elif isinstance(value, bytes):
            target.write_bytes(value)
        else:
            target.write_text(value)

    return root
