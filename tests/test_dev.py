"""Tests for the development check helper."""

import pytest

from dev import check_steps


@pytest.mark.parametrize("ci", [True, False])
def test_every_step_runs_through_uv(ci: bool) -> None:
    """Verify tools run in the project environment rather than from PATH."""
    steps = check_steps(ci=ci)
    assert all(command[:2] == ["uv", "run"] for command, _ in steps)
    assert steps[-1] == (["uv", "run", "pytest"], "Tests")


def test_ci_does_not_rewrite_files() -> None:
    """Verify the CI steps only check formatting and lint."""
    commands = [command for command, _ in check_steps(ci=True)]
    assert ["uv", "run", "ruff", "format", "--check"] in commands
    assert not any("--fix" in command for command in commands)
