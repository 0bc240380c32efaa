"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from api_reference_index.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    # Specification codenames to index; empty means every specification.
    "specifications": [],
    "output": {
        "indent": 2,
        "ensure_ascii": False,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    An explicitly given path must exist.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {p}"
            raise SystemExit(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        config = deep_merge(config, user_config)
    return config
