"""Grouping of converted items into fixed-size batches."""

from collections.abc import AsyncIterable, AsyncIterator

from rustdoc_index.doc_item import DocItem
from rustdoc_index.presentation_entry import PresentationEntry
from rustdoc_index.to_presentation_entry import to_presentation_entry

BUFFER_SIZE = 1024


async def batch_entries(
    items: AsyncIterable[DocItem],
    size: int = BUFFER_SIZE,
) -> AsyncIterator[list[PresentationEntry]]:
    """Convert ``items`` and yield them in lists of at most ``size`` entries.

    A batch is yielded as soon as it is full; a trailing partial batch is
    yielded only if it is non-empty.
    """
    if size < 1:
        msg = f"Batch size must be positive, got {size}"
        raise ValueError(msg)
    buf: list[PresentationEntry] = []
    async for item in items:
        buf.append(to_presentation_entry(item))
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf
