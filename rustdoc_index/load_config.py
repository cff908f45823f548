"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_index.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "std_doc": {
        "command": ["rustup", "doc", "--path"],
        "toolchains_dir": ".rustup/toolchains",
        "doc_subdir": "share/doc/rust/html",
        "prefixes": {
            "stable": "stable-",
            "nightly": "nightly-",
        },
    },
    "project": {
        "marker": "Cargo.toml",
        "doc_subdir": "target/doc",
    },
    "stream": {
        "batch_size": 1024,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as e:
                msg = f"Cannot read config {p}: {e}"
                raise SystemExit(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Config {p} must be a mapping, got {type(user_config).__name__}"
                raise SystemExit(msg)
            config = deep_merge(config, user_config)
    return config
