"""Discovery of the Rust standard library documentation directory.

Lookup order:

1. Output of ``rustup doc --path`` (the parent of the reported index file).
2. ``$HOME/.rustup/toolchains/stable-*``.
3. ``$HOME/.rustup/toolchains/nightly-*``.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from rustdoc_index.command_runner import CommandRunner
from rustdoc_index.deep_merge import deep_merge
from rustdoc_index.list_subdirs import list_subdirs
from rustdoc_index.load_config import DEFAULT_CONFIG
from rustdoc_index.pick_toolchain import pick_toolchain

logger = logging.getLogger(__name__)


async def _doc_dir_from_command(
    runner: CommandRunner, command: list[str]
) -> str | None:
    try:
        name, *args = command
        out = await runner.run(name, args)
    except Exception as e:
        logger.debug("Cannot run %s: %r", " ".join(command), e)
        return None
    index_file = out.stdout.strip()
    if not out.success or not index_file:
        logger.debug("%s reported no documentation path", " ".join(command))
        return None
    return os.path.dirname(index_file)


async def find_std_doc_dir(
    *,
    runner: CommandRunner,
    env: Mapping[str, str] | None = None,
    config: dict[str, Any] | None = None,
) -> str | None:
    """Locate the standard library docs, or None when nothing is found.

    Never raises: a failing command falls through to the toolchain search.
    The returned directory is not checked for existence.
    """
    cfg = deep_merge(DEFAULT_CONFIG, config or {})["std_doc"]
    doc_dir = await _doc_dir_from_command(runner, list(cfg["command"]))
    if doc_dir is not None:
        return doc_dir

    home_dir = (os.environ if env is None else env).get("HOME")
    if home_dir is None:
        return None
    toolchains_dir = os.path.join(home_dir, cfg["toolchains_dir"])
    toolchain = pick_toolchain(
        await list_subdirs(toolchains_dir),
        stable_prefix=cfg["prefixes"]["stable"],
        nightly_prefix=cfg["prefixes"]["nightly"],
    )
    if toolchain is None:
        logger.debug("No stable or nightly toolchain under %s", toolchains_dir)
        return None
    return os.path.join(toolchains_dir, toolchain, cfg["doc_subdir"])
