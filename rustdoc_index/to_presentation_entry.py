"""Conversion of DocItem records into picker entries."""

from rustdoc_index.doc_item import DocItem
from rustdoc_index.doc_item_file_path import doc_item_file_path
from rustdoc_index.item_kinds import KIND_WIDTH
from rustdoc_index.parse_doc_path import MODULE_SEP
from rustdoc_index.presentation_entry import ActionData, PresentationEntry


def to_presentation_entry(item: DocItem) -> PresentationEntry:
    """Build the display line and action payload for ``item``."""
    module = f"{item.module}{MODULE_SEP}" if item.module is not None else ""
    return PresentationEntry(
        word=item.name,
        display=f"{item.kind.ljust(KIND_WIDTH)} {module}{item.name}",
        action=ActionData(
            kind=item.kind,
            module=item.module,
            name=item.name,
            url=f"file://{doc_item_file_path(item)}",
        ),
    )
