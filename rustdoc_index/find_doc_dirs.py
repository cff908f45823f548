"""Resolution of the documentation roots to scan for a given location."""

import logging
import os
from collections.abc import Mapping
from typing import Any

from rustdoc_index.command_runner import CommandRunner
from rustdoc_index.deep_merge import deep_merge
from rustdoc_index.find_project_dir import find_project_dir
from rustdoc_index.find_std_doc_dir import find_std_doc_dir
from rustdoc_index.fs_exists import fs_exists
from rustdoc_index.load_config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


async def find_doc_dirs(
    path: str,
    *,
    runner: CommandRunner,
    env: Mapping[str, str] | None = None,
    config: dict[str, Any] | None = None,
) -> list[str]:
    """Return existing doc roots: std docs first, then the project's docs."""
    cfg = deep_merge(DEFAULT_CONFIG, config or {})
    docs: list[str] = []

    std_doc_dir = await find_std_doc_dir(runner=runner, env=env, config=cfg)
    if std_doc_dir is not None and await fs_exists(std_doc_dir):
        docs.append(std_doc_dir)

    project_dir = await find_project_dir(path, marker=cfg["project"]["marker"])
    if project_dir is not None:
        doc_dir = os.path.join(project_dir, cfg["project"]["doc_subdir"])
        if await fs_exists(doc_dir):
            docs.append(doc_dir)

    logger.info("Documentation roots for %s: %s", path, docs)
    return docs
