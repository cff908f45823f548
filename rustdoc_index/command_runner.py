"""Capability for running an external command and capturing its output."""

import asyncio
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CommandOutput:
    """Result of running an external command."""

    success: bool
    stdout: str


class CommandRunner(Protocol):
    """Runs ``name`` with ``args`` and reports success and captured stdout."""

    async def run(self, name: str, args: list[str]) -> CommandOutput:
        """Run the command; may raise if it cannot be started."""
        ...


class SubprocessRunner:
    """CommandRunner backed by a real child process.

    Raises OSError when the executable cannot be started; callers decide
    whether that is fatal.
    """

    async def run(self, name: str, args: list[str]) -> CommandOutput:
        """Run the command with no stdin and return its stdout."""
        process = await asyncio.create_subprocess_exec(
            name,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
        stdout, _ = await process.communicate()
        return CommandOutput(
            success=process.returncode == 0,
            stdout=stdout.decode("utf-8", errors="replace"),
        )
