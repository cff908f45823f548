"""Pull-based delivery of entry batches to a consumer."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

from rustdoc_index.presentation_entry import PresentationEntry

logger = logging.getLogger(__name__)


class UninitializedStreamError(RuntimeError):
    """Raised when a batch is pulled before the stream was started."""


@dataclass(frozen=True)
class StreamResult:
    """One pull: a batch in ``value``, or ``done`` once exhausted."""

    value: list[PresentationEntry] | None
    done: bool


class ItemStream:
    """Two-step stream: ``await start()`` once, then ``await next()`` per batch.

    ``open_batches`` builds the batch generator and is only invoked by
    ``start()``, so no filesystem or process work happens before then.
    """

    def __init__(
        self,
        open_batches: Callable[[], Awaitable[AsyncIterator[list[PresentationEntry]]]],
    ) -> None:
        """Initialize the stream around a batch generator factory."""
        self._open_batches = open_batches
        self._batches: AsyncIterator[list[PresentationEntry]] | None = None
        self._done = False

    @property
    def started(self) -> bool:
        """Whether ``start()`` has opened the batch generator."""
        return self._batches is not None

    async def start(self) -> None:
        """Begin producing batches."""
        if self._batches is None:
            self._batches = await self._open_batches()

    def next(self) -> Awaitable[StreamResult]:
        """Return an awaitable for the next batch.

        Raises UninitializedStreamError right away when ``start()`` has not
        been called.
        """
        if self._batches is None:
            msg = "uninitialized items iterator"
            raise UninitializedStreamError(msg)
        return self._pull(self._batches)

    async def _pull(
        self, batches: AsyncIterator[list[PresentationEntry]]
    ) -> StreamResult:
        if self._done:
            return StreamResult(value=None, done=True)
        try:
            value = await anext(batches)
        except StopAsyncIteration:
            self._done = True
            logger.debug("Item stream exhausted")
            return StreamResult(value=None, done=True)
        return StreamResult(value=value, done=False)

    async def aclose(self) -> None:
        """Stop pulling; lets an in-flight walk finish filling the cache."""
        self._done = True
        if self._batches is not None and hasattr(self._batches, "aclose"):
            await self._batches.aclose()

    def __aiter__(self) -> "ItemStream":
        return self

    async def __anext__(self) -> list[PresentationEntry]:
        await self.start()
        result = await self.next()
        if result.done or result.value is None:
            raise StopAsyncIteration
        return result.value
