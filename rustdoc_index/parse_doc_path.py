"""Classification of rustdoc HTML paths into DocItem records."""

import posixpath
import re

from rustdoc_index.doc_item import DocItem

SOURCE_DIR_PREFIX = "src/"
MODULE_INDEX = "index.html"
MODULE_SEP = "::"

# <kind>.<name>.html, e.g. struct.Vec.html, fn.spawn.html
ITEM_FILE_RE = re.compile(r"([^.]+)\.([^.]+)\.html$")


def _module_path(rel_dir: str) -> str:
    return rel_dir.rstrip("/").replace("/", MODULE_SEP)


def parse_doc_path(rel_path: str, doc_dir: str) -> DocItem | None:
    """Parse a path relative to ``doc_dir`` (``/``-separated) into a DocItem.

    Returns None for source listings, the root index and files that do not
    follow the rustdoc naming convention.
    """
    if rel_path.startswith(SOURCE_DIR_PREFIX):
        return None

    rel_dir, filename = posixpath.split(rel_path)
    if filename == MODULE_INDEX:
        name = posixpath.basename(rel_dir)
        if name in {"", "."}:
            return None
        parent_dir = posixpath.dirname(rel_dir)
        parent = None if parent_dir in {"", "."} else _module_path(parent_dir)
        return DocItem(kind="module", module=parent, name=name, doc_dir=doc_dir)

    m = ITEM_FILE_RE.search(filename)
    if m is None:
        return None
    return DocItem(
        kind=m.group(1),
        module=_module_path(rel_dir),
        name=m.group(2),
        doc_dir=doc_dir,
    )
