"""Shared fixtures for the rustdoc_index tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from rustdoc_index.command_runner import CommandOutput


class FakeRunner:
    """CommandRunner that records calls and replays a canned result."""

    def __init__(
        self,
        output: CommandOutput | None = None,
        error: Exception | None = None,
    ) -> None:
        self.output = output or CommandOutput(success=False, stdout="")
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    async def run(self, name: str, args: list[str]) -> CommandOutput:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def failing_runner() -> FakeRunner:
    """Runner whose command always exits unsuccessfully."""
    return FakeRunner(CommandOutput(success=False, stdout=""))


@pytest.fixture
def make_files() -> Callable[[Path, list[str]], Path]:
    """Create empty files at the given relative paths under a root."""

    def _make(root: Path, rel_paths: list[str]) -> Path:
        for rel in rel_paths:
            f = root / rel
            f.parent.mkdir(parents=True, exist_ok=True)
            f.write_text("<html></html>", encoding="utf-8")
        return root

    return _make
