"""List Rust documentation items from the command line.

Runs the same pipeline a picker uses and prints one entry per line.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from rustdoc_index.editor_context import StaticEditorContext
from rustdoc_index.load_config import load_config
from rustdoc_index.rust_doc_source import RustDocSource

logger = logging.getLogger(__name__)


async def list_doc_items(args: argparse.Namespace) -> int:
    """Print every entry found for ``args.path``."""
    config = load_config(args.config)
    source = RustDocSource(config=config)
    context = StaticEditorContext(buffer=args.buffer, directory=str(args.path))
    count = 0
    async for batch in source.gather(context):
        for entry in batch:
            if args.json:
                print(json.dumps(entry.to_dict(), ensure_ascii=False))
            else:
                print(entry.display)
        count += len(batch)
    logger.info("Listed %s entries", count)
    return 0


def main() -> int:
    """Run the listing."""
    ap = argparse.ArgumentParser(
        description="List items from local rustdoc output (std and Cargo project).",
    )
    ap.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path(os.getcwd()),
        help="Directory to start the Cargo project search from (default: cwd)",
    )
    ap.add_argument(
        "--buffer",
        default="",
        help="Buffer name relative to PATH, as an editor would report it",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print entries as JSON objects instead of display lines",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and indexing details to stderr",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return asyncio.run(list_doc_items(args))


if __name__ == "__main__":
    raise SystemExit(main())
