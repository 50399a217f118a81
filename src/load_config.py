"""Logic for loading and merging configuration files."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "report": {
        "include_undocumented": True,
        "labels": [],
    },
    "lookup": {
        "max_results": 20,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge({}, DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def compute_config_hash(config: dict[str, Any]) -> str:
    """Fingerprint a merged configuration for report metadata."""
    canonical = json.dumps(config, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
