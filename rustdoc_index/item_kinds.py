"""Item categories rustdoc emits pages for."""

ITEM_KINDS = (
    "module",
    "struct",
    "trait",
    "macro",
    "fn",
    "type",
    "enum",
    "keyword",
    "constant",
    "primitive",
    "traitalias",
)

# Column width of the kind tag in display strings.
KIND_WIDTH = max(len(k) for k in ITEM_KINDS)
