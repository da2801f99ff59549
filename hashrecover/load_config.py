"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from hashrecover.base_fields import DEFAULT_BASE_FIELDS
from hashrecover.deep_merge import deep_merge
from hashrecover.render_schema import DEFAULT_BASE_MARKER, DEFAULT_STRUCT_PREFIX

DEFAULT_CONFIG: dict[str, Any] = {
    "digest": {
        "encoding": "ascii",
    },
    "word_lists": [],
    "base_fields": list(DEFAULT_BASE_FIELDS),
    "render": {
        "struct_prefix": DEFAULT_STRUCT_PREFIX,
        "base_marker": DEFAULT_BASE_MARKER,
    },
    "resolver": {
        "workers": 1,
    },
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
