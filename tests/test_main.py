"""Tests for the root launcher's argument forwarding."""

import sys

from main import build_command


def test_options_before_manifest_are_forwarded_in_order() -> None:
    """Verify option values are not mistaken for the manifest."""
    dev, cmd = build_command(["--workers", "2", "m.yml", "--dry-run"])
    assert dev is False
    assert cmd == [
        sys.executable,
        "-m",
        "hashrecover.recover_symbols",
        "--workers",
        "2",
        "m.yml",
        "--dry-run",
    ]


def test_dev_flag_is_consumed() -> None:
    """Verify --dev stays with the launcher and the rest is passed through."""
    dev, cmd = build_command(["m.yml", "--dev", "--dump-names", "out"])
    assert dev is True
    assert cmd[3:] == ["m.yml", "--dump-names", "out"]
