#!/usr/bin/env python3
"""
Streaming walk example for TreeWalkLib.

This example demonstrates:
- Async walking with a bounded stream
- Pattern and depth options
- Per-entry errors and symlink targets
"""

import asyncio
import sys
from pathlib import Path

from treewalklib import WalkerConfig, with_fnmatch_patterns, with_max_recurse_depth
from treewalklib.aio import walk


async def main():
    """List a tree the way an archiver would see it."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    patterns = sys.argv[2:]

    options = [with_max_recurse_depth(3)]
    if patterns:
        options.append(with_fnmatch_patterns(*patterns))
    config = WalkerConfig.from_options(*options)

    print(f"Walking: {root_path}")
    print("-" * 50)

    errors = 0
    async with await walk(root_path, config, buffer_size=16) as stream:
        async for entry in stream:
            if entry.error is not None:
                errors += 1
                print(f"  ! {entry.rel_path}: {entry.error}")
            elif entry.link_target is not None:
                print(f"  {entry.rel_path} -> {entry.link_target}")
            else:
                suffix = "/" if entry.is_dir else ""
                print(f"  {entry.rel_path}{suffix}")

    if errors:
        print(f"\n{errors} entries could not be read")


if __name__ == "__main__":
    print("TreeWalkLib - Streaming Walk Example")
    print("=" * 50)
    asyncio.run(main())
