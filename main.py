"""Main orchestration script for running checks and name recovery."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def build_command(argv: Sequence[str] | None = None) -> tuple[bool, list[str]]:
    """Split off launcher flags; everything else goes to the recovery CLI."""
    parser = argparse.ArgumentParser(
        description="Recover hashed entity and variable names from a scene manifest.",
        epilog="All other arguments are passed to hashrecover.recover_symbols.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before recovery",
    )
    args, passthrough = parser.parse_known_args(argv)
    cmd = [sys.executable, "-m", "hashrecover.recover_symbols", *passthrough]
    return args.dev, cmd


def main() -> None:
    """Run the full name recovery pipeline."""
    dev, cmd = build_command()

    root_dir = Path(__file__).parent

    if dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with recovery.\n")

    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
