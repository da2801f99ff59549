"""Tests for the candidate dictionary."""

from hashrecover.candidate_dictionary import CandidateDictionary


def test_add_all_preserves_first_seen_order() -> None:
    """Verify names keep the order they were first added in."""
    d = CandidateDictionary(["Ring", "Player"])
    d.add_all(["xPos", "Ring", "Spring"])
    assert d.all() == ["Ring", "Player", "xPos", "Spring"]


def test_duplicate_is_ignored() -> None:
    """Verify a name added from two sources appears once, at its first slot."""
    d = CandidateDictionary()
    d.add_all(["Ring", "Player"])
    assert d.add("Ring") is False
    assert d.all().count("Ring") == 1
    assert d.all().index("Ring") == 0


def test_add_all_reports_added_count() -> None:
    """Verify add_all counts only new names."""
    d = CandidateDictionary(["a"])
    assert d.add_all(["a", "b", "b", "c"]) == 2
    assert len(d) == 3


def test_all_is_a_snapshot() -> None:
    """Verify growing the dictionary does not change an earlier snapshot."""
    d = CandidateDictionary(["a"])
    snapshot = d.all()
    d.add("b")
    assert snapshot == ["a"]
    assert "b" in d
    assert list(d) == ["a", "b"]
