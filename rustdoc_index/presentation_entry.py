"""Data models for entries handed to the picker."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ActionData:
    """Payload attached to an entry; ``url`` points at the doc page."""

    kind: str
    module: str | None
    name: str
    url: str


@dataclass(frozen=True)
class PresentationEntry:
    """Represents one selectable picker entry."""

    word: str  # Text matched by the picker's filter
    display: str
    action: ActionData

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as plain dicts."""
        return asdict(self)
