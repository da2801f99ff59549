"""Logic for writing the results of a recovery run to disk."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from hashrecover.render_schema import (
    DEFAULT_BASE_MARKER,
    DEFAULT_STRUCT_PREFIX,
    render_schemas,
)
from hashrecover.run_summary import RunSummary

REPORT_SCHEMA_VERSION = 1


class RunReport:
    """Collects a run summary and cache statistics and writes them out."""

    def __init__(self, config_hash: str, config: dict[str, Any]) -> None:
        """Initialize the report with the configuration it was produced under."""
        self.config_hash = config_hash
        self.config = config
        self.start_time = time.time()

    def generate_report(
        self,
        path: str | Path,
        summary: RunSummary,
        cache: dict[str, int],
        base_field_hits: Counter[str],
    ) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": REPORT_SCHEMA_VERSION,
            },
            "counts": {
                "entity_types": summary.entity_types,
                "field_names": summary.field_names,
                "unresolved": summary.unresolved_count,
                "instances": summary.instances,
            },
            "unresolved": summary.unresolved,
            "cache": cache,
            "base_field_hits": dict(sorted(base_field_hits.items())),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def write_structs(self, path: str | Path, summary: RunSummary) -> None:
        """Write every captured schema as a struct listing."""
        render = self.config.get("render", {})
        text = render_schemas(
            summary.schemas,
            struct_prefix=render.get("struct_prefix", DEFAULT_STRUCT_PREFIX),
            base_marker=render.get("base_marker", DEFAULT_BASE_MARKER),
        )
        Path(path).write_text(text, encoding="utf-8")


def write_name_dumps(
    out_dir: str | Path, entity_names: list[str], field_names: list[str]
) -> None:
    """Write the sorted distinct object and variable names seen in a run."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    for filename, names in (
        ("objectnames.txt", entity_names),
        ("varnames.txt", field_names),
    ):
        lines = sorted(set(names))
        (out / filename).write_text(
            "".join(f"{n}\n" for n in lines), encoding="utf-8"
        )
