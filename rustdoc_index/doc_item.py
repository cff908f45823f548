"""Data model for a documented item found under a doc root."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocItem:
    """Represents one rustdoc page (module, struct, fn, etc.)."""

    kind: str  # Free-form tag from the filename, usually one of ITEM_KINDS
    module: str | None  # "a::b"; "" at top level, None for crate-level modules
    name: str
    doc_dir: str  # Root the item was found under
