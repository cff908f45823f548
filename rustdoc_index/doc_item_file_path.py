"""Utility for reconstructing the file a DocItem was parsed from."""

import os

from rustdoc_index.doc_item import DocItem
from rustdoc_index.parse_doc_path import MODULE_INDEX, MODULE_SEP


def doc_item_file_path(item: DocItem) -> str:
    """Return the absolute path of the HTML page documenting ``item``."""
    file_path = item.doc_dir
    if item.module:
        file_path = os.path.join(file_path, *item.module.split(MODULE_SEP))
    if item.kind == "module":
        return os.path.join(file_path, item.name, MODULE_INDEX)
    return os.path.join(file_path, f"{item.kind}.{item.name}.html")
