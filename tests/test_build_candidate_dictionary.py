"""Tests for word list loading and dictionary seeding."""

from pathlib import Path

import pytest

from hashrecover.build_candidate_dictionary import build_candidate_dictionary
from hashrecover.load_word_list import load_word_list


def test_load_word_list_skips_blanks_and_comments(tmp_path: Path) -> None:
    """Verify only real names are read from a word list."""
    path = tmp_path / "names.txt"
    path.write_text("# objects\nRing\n\n  Player  \r\n#Spring\n", encoding="utf-8")
    assert load_word_list(path) == ["Ring", "Player"]


def test_load_word_list_missing_file(tmp_path: Path) -> None:
    """Verify a missing word list fails fast."""
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "missing.txt")


def test_seed_order(tmp_path: Path) -> None:
    """Verify word lists come first, then base fields, then known names."""
    first = tmp_path / "filenames.txt"
    first.write_text("Ring\nposition\n", encoding="utf-8")
    second = tmp_path / "varnames.txt"
    second.write_text("type\nRing\n", encoding="utf-8")

    dictionary = build_candidate_dictionary(
        [first, second], ["position", "scale"], ["Player", "Ring"]
    )
    assert dictionary.all() == ["Ring", "position", "type", "scale", "Player"]
