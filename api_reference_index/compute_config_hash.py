"""Logic for computing stable hashes of configuration objects."""

import hashlib
import json
from typing import Any

# Keys that do not change which records are produced.
VOLATILE_KEYS = ("logging",)


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the configuration.

    Uses canonical JSON serialization (sorted keys) and ignores settings
    that only affect diagnostics.
    """
    relevant = {k: v for k, v in config.items() if k not in VOLATILE_KEYS}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
