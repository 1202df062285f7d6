"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from quarry.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "docs": {
        # Directory holding the rustdoc JSON exports (<crate>.json).
        "doc_dir": None,
        "crates": ["std", "alloc", "core"],
        # Leave out crates without an export instead of failing the build.
        "skip_missing_crates": False,
    },
    "aliases": {},
    "alias_files": [],
    # "bare_name" or "skip" for structs outside std/alloc/core sources.
    "unresolved": "bare_name",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
