"""Logic for fingerprinting the inputs that decide a recovery run."""

import hashlib
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any


def compute_config_hash(
    config: dict[str, Any], word_lists: Iterable[str | Path] = ()
) -> str:
    """Compute a stable hash of the configuration and word list contents.

    Uses canonical JSON serialization (sorted keys). Word lists are hashed by
    content in load order, since editing a list changes what can be resolved
    even when its path stays the same.
    """
    h = hashlib.sha256()
    h.update(json.dumps(config, sort_keys=True, ensure_ascii=True).encode("utf-8"))
    for path in word_lists:
        h.update(b"\0")
        h.update(Path(path).read_bytes())
    return h.hexdigest()
