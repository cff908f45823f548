"""Utility for listing the subdirectories of a directory."""

import asyncio
import logging
import os

logger = logging.getLogger(__name__)


def _scan(path: str) -> list[str]:
    with os.scandir(path) as it:
        return [entry.name for entry in it if entry.is_dir()]


async def list_subdirs(path: str) -> list[str]:
    """Return subdirectory names of ``path`` in enumeration order.

    A missing or unreadable directory yields an empty list.
    """
    try:
        return await asyncio.to_thread(_scan, path)
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return []
