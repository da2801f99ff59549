"""Recover object and variable names from digest-only scene symbols.

Reads a scene manifest, guesses the names behind stored MD5 digests using
word lists and the names the game config already knows, and writes one
struct per distinct object type plus a JSON report of what stayed unknown.
"""

import argparse
import logging
from pathlib import Path

from hashrecover.run_recovery import run_recovery


def main() -> int:
    """Run the recovery process."""
    ap = argparse.ArgumentParser(
        description="Recover entity and variable names from hashed scene symbols.",
    )
    ap.add_argument(
        "manifest",
        type=Path,
        help="YAML scene manifest produced by a scene reader",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        default=Path("recovered"),
        help="Directory for entities.txt and report.json (default: recovered)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--word-list",
        type=Path,
        action="append",
        default=[],
        help="Extra candidate word list, one name per line (repeatable)",
    )
    ap.add_argument(
        "--workers",
        type=int,
        help="Resolve digests across this many threads",
    )
    ap.add_argument(
        "--dump-names",
        type=Path,
        help="Also write objectnames.txt and varnames.txt into this directory",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and print the summary without writing files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-scene progress",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_recovery(args)


if __name__ == "__main__":
    raise SystemExit(main())
