"""Existence probe that never raises."""

import asyncio
import os


async def fs_exists(path: str) -> bool:
    """Return True if ``path`` can be stat'ed, False on any OS error."""
    try:
        await asyncio.to_thread(os.stat, path)
    except OSError:
        return False
    return True
