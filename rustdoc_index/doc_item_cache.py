"""Process-lifetime cache of parsed documentation roots."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing

from rustdoc_index.doc_item import DocItem
from rustdoc_index.iter_doc_items import iter_doc_items

logger = logging.getLogger(__name__)


class DocItemCache:
    """Maps a doc root to the items found there, walking each root once.

    Entries are never evicted or invalidated. A bucket is registered before
    its walk starts, so a second query issued while the first walk is still
    running replays a partial list. A walk that is cancelled or fails leaves
    no bucket behind.
    """

    def __init__(
        self,
        walker: Callable[[str], AsyncIterator[DocItem]] = iter_doc_items,
    ) -> None:
        """Initialize an empty cache that walks roots with ``walker``."""
        self.walker = walker
        self.buckets: dict[str, list[DocItem]] = {}
        self.walk_count = 0

    def __contains__(self, doc_dir: object) -> bool:
        """Return True if ``doc_dir`` has a bucket, complete or in progress."""
        return doc_dir in self.buckets

    async def get_or_populate(self, doc_dir: str) -> AsyncIterator[DocItem]:
        """Replay the items of ``doc_dir``, walking it on first use."""
        if doc_dir in self.buckets:
            for item in list(self.buckets[doc_dir]):
                yield item
            return

        bucket: list[DocItem] = []
        self.buckets[doc_dir] = bucket
        self.walk_count += 1
        logger.debug("Walking %s", doc_dir)
        items = self.walker(doc_dir)
        try:
            async for item in items:
                bucket.append(item)
                yield item
        except GeneratorExit:
            # Consumer stopped early; finish the walk so the bucket is complete.
            try:
                async for item in items:
                    bucket.append(item)
            except BaseException:
                self._discard(doc_dir, bucket)
                raise
            raise
        except BaseException:
            # Cancelled or failed walk; the next query walks again.
            self._discard(doc_dir, bucket)
            raise
        logger.info("Indexed %s items under %s", len(bucket), doc_dir)

    def _discard(self, doc_dir: str, bucket: list[DocItem]) -> None:
        if self.buckets.get(doc_dir) is bucket:
            del self.buckets[doc_dir]
            logger.debug("Dropped incomplete index of %s", doc_dir)

    async def items_for(self, doc_dirs: list[str]) -> AsyncIterator[DocItem]:
        """Yield the items of every root in ``doc_dirs``, in order."""
        for doc_dir in doc_dirs:
            async with aclosing(self.get_or_populate(doc_dir)) as items:
                async for item in items:
                    yield item
