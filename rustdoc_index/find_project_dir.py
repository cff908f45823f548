"""Upward search for the directory holding a project marker file."""

import os
from collections.abc import Awaitable, Callable

from rustdoc_index.fs_exists import fs_exists

PROJECT_MARKER = "Cargo.toml"

# Paths at which the upward search gives up.
_TERMINAL_PATHS = {"/", ".", ""}


async def find_project_dir(
    start: str,
    *,
    marker: str = PROJECT_MARKER,
    exists: Callable[[str], Awaitable[bool]] = fs_exists,
) -> str | None:
    """Find the closest ancestor of ``start`` (inclusive) containing ``marker``.

    Checks ``start``, then each parent in turn, and stops at the filesystem
    root or at an empty/degenerate path. Returns the absolute directory path,
    or None when no ancestor holds the marker.
    """
    p = start
    while p not in _TERMINAL_PATHS:
        if await exists(os.path.join(p, marker)):
            return os.path.abspath(p)
        parent = os.path.dirname(p)
        if parent == p:
            break
        p = parent
    return None
