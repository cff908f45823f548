"""Walking a documentation root into DocItem records."""

import os
from collections.abc import AsyncIterator
from pathlib import PurePath

from rustdoc_index.doc_item import DocItem
from rustdoc_index.parse_doc_path import parse_doc_path
from rustdoc_index.walk_html_files import walk_html_files


async def iter_doc_items(doc_dir: str) -> AsyncIterator[DocItem]:
    """Yield every item documented under ``doc_dir``.

    Each call walks the directory again; caching is DocItemCache's job.
    """
    async for f in walk_html_files(doc_dir):
        rel = PurePath(os.path.relpath(f, doc_dir)).as_posix()
        item = parse_doc_path(rel, doc_dir)
        if item is not None:
            yield item
