"""Picker source listing Rust documentation items."""

from collections.abc import AsyncIterator, Mapping
from contextlib import aclosing
from typing import Any

from rustdoc_index.batch_entries import batch_entries
from rustdoc_index.command_runner import CommandRunner, SubprocessRunner
from rustdoc_index.deep_merge import deep_merge
from rustdoc_index.doc_item_cache import DocItemCache
from rustdoc_index.editor_context import EditorContext, start_path
from rustdoc_index.find_doc_dirs import find_doc_dirs
from rustdoc_index.item_stream import ItemStream
from rustdoc_index.load_config import DEFAULT_CONFIG
from rustdoc_index.presentation_entry import PresentationEntry


class RustDocSource:
    """Gathers std and project documentation entries for a picker.

    One instance owns one DocItemCache; keep the instance alive for the
    session so each doc root is walked only once.
    """

    kind = "url"

    def __init__(
        self,
        *,
        runner: CommandRunner | None = None,
        cache: DocItemCache | None = None,
        env: Mapping[str, str] | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the source with injectable collaborators."""
        self.runner = runner or SubprocessRunner()
        self.cache = cache or DocItemCache()
        self.env = env
        self.config = deep_merge(DEFAULT_CONFIG, config or {})

    def gather(self, context: EditorContext) -> ItemStream:
        """Return a stream of entry batches for the editor's location."""

        async def open_batches() -> AsyncIterator[list[PresentationEntry]]:
            path = await start_path(context)
            doc_dirs = await find_doc_dirs(
                path, runner=self.runner, env=self.env, config=self.config
            )
            return self._batches(doc_dirs)

        return ItemStream(open_batches)

    async def _batches(
        self, doc_dirs: list[str]
    ) -> AsyncIterator[list[PresentationEntry]]:
        size = self.config["stream"]["batch_size"]
        async with aclosing(self.cache.items_for(doc_dirs)) as items:
            async with aclosing(batch_entries(items, size)) as batches:
                async for batch in batches:
                    yield batch

    def params(self) -> dict[str, Any]:
        """Return the (empty) picker parameters."""
        return {}
