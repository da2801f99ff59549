"""Development script to run checks (formatting, linting, tests)."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def check_steps(*, ci: bool) -> list[tuple[list[str], str]]:
    """Return the commands to run, each through uv in the project environment."""
    if ci:
        steps = [
            (["uv", "run", "ruff", "format", "--check"], "Ruff Format Check"),
            (["uv", "run", "ruff", "check"], "Ruff Linting"),
        ]
    else:
        # Run auto-formatting and fixing
        steps = [
            (["uv", "run", "ruff", "format"], "Ruff Formatting"),
            (["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes"),
        ]
    steps.append((["uv", "run", "pytest"], "Tests"))
    return steps


def main() -> None:
    """Run the development checks."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci", action="store_true", help="Check only, do not rewrite any files"
    )
    args = parser.parse_args()

    for command, step_name in check_steps(ci=args.ci):
        run_command(command, step_name)

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
