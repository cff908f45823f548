"""Recursive traversal of a documentation root."""

import asyncio
import logging
import os
from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

HTML_EXT = ".html"


def _scan(path: str) -> tuple[list[str], list[str]]:
    dirs: list[str] = []
    files: list[str] = []
    with os.scandir(path) as it:
        for entry in sorted(it, key=lambda e: e.name):
            if entry.is_dir(follow_symlinks=False):
                dirs.append(entry.path)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith(
                HTML_EXT
            ):
                files.append(entry.path)
    return dirs, files


async def walk_html_files(root: str) -> AsyncIterator[str]:
    """Yield paths of regular ``.html`` files under ``root``, depth first.

    Files of a directory come before its subdirectories; entries are visited
    in name order. Symlinks are not followed and unreadable directories are
    skipped.
    """
    stack = [root]
    while stack:
        current = stack.pop()
        try:
            dirs, files = await asyncio.to_thread(_scan, current)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)
            continue
        for f in files:
            yield f
        stack.extend(reversed(dirs))
