"""Orchestration logic for recovering names from a scene manifest."""

import argparse
import logging
import time
from typing import Any

from hashrecover.build_candidate_dictionary import build_candidate_dictionary
from hashrecover.compute_config_hash import compute_config_hash
from hashrecover.digest_oracle import DigestOracle
from hashrecover.errors import ManifestError
from hashrecover.load_config import load_config
from hashrecover.load_scene_manifest import load_scene_manifest
from hashrecover.run_aggregator import RunAggregator
from hashrecover.run_report import RunReport, write_name_dumps
from hashrecover.run_summary import RunSummary
from hashrecover.schema_synthesizer import SchemaSynthesizer
from hashrecover.symbol_resolver import SymbolResolver

logger = logging.getLogger(__name__)


def run_recovery(args: argparse.Namespace) -> int:
    """Execute the full recovery pipeline."""
    timer = time.perf_counter()
    config = _init_config(args)
    report = RunReport(
        compute_config_hash(config, config["word_lists"]), config
    )

    oracle = DigestOracle(config["digest"]["encoding"])
    try:
        manifest = load_scene_manifest(args.manifest, oracle)
    except ManifestError as e:
        msg = f"Invalid manifest {args.manifest}: {e}"
        raise SystemExit(msg) from e

    # Known names must be in place before any digest is looked up.
    dictionary = build_candidate_dictionary(
        config["word_lists"], config["base_fields"], manifest.known_names
    )
    resolver = SymbolResolver(dictionary, oracle)
    synthesizer = SchemaSynthesizer(config["base_fields"])
    aggregator = RunAggregator(
        resolver, synthesizer, workers=config["resolver"]["workers"]
    )
    aggregator.process(manifest.instances)
    summary = aggregator.summary()

    if not args.dry_run:
        out_dir = args.out_dir.resolve()
        out_dir.mkdir(parents=True, exist_ok=True)
        report.write_structs(out_dir / "entities.txt", summary)
        report.generate_report(
            out_dir / "report.json",
            summary,
            cache={
                "hits": oracle.hits,
                "misses": oracle.misses,
                "lookups": resolver.lookups,
                "dictionary_size": len(dictionary),
            },
            base_field_hits=synthesizer.base_field_hits,
        )
        if args.dump_names:
            write_name_dumps(
                args.dump_names,
                list(aggregator.entity_names),
                list(aggregator.field_names),
            )

    _print_summary(summary, time.perf_counter() - timer)
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    config = load_config(args.config)
    if args.word_list:
        config["word_lists"] = list(
            dict.fromkeys([*config["word_lists"], *map(str, args.word_list)])
        )
    if args.workers is not None:
        config["resolver"]["workers"] = args.workers
    return config


def _print_summary(summary: RunSummary, elapsed: float) -> None:
    print(f"Done in {elapsed:.3f}s")
    print(f"{summary.entity_types} objects")
    print(f"{summary.field_names} unique variable names")
    if summary.unresolved:
        print(f"Unresolved symbols ({summary.unresolved_count}):")
        for unresolved in summary.unresolved:
            print(unresolved)
