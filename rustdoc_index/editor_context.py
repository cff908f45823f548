"""Accessor for the host editor's notion of "where the user is"."""

import os
from dataclasses import dataclass
from typing import Protocol


class EditorContext(Protocol):
    """Supplies the current buffer name and working directory."""

    async def buffer_name(self) -> str:
        """Return the current buffer name, relative to ``cwd()`` or absolute."""
        ...

    async def cwd(self) -> str:
        """Return the editor's working directory."""
        ...


@dataclass(frozen=True)
class StaticEditorContext:
    """EditorContext with fixed values, for command line use and tests."""

    buffer: str
    directory: str

    async def buffer_name(self) -> str:
        """Return the fixed buffer name."""
        return self.buffer

    async def cwd(self) -> str:
        """Return the fixed working directory."""
        return self.directory


async def start_path(context: EditorContext) -> str:
    """Join the working directory and buffer name into a search start path."""
    return os.path.normpath(
        os.path.join(await context.cwd(), await context.buffer_name())
    )
