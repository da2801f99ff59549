"""Shared fixtures for the recovery tests."""

import pytest

from hashrecover.digest_oracle import DigestOracle
from hashrecover.symbol import Symbol


@pytest.fixture
def oracle() -> DigestOracle:
    """A fresh oracle with an empty cache."""
    return DigestOracle()


@pytest.fixture
def hashed(oracle: DigestOracle):
    """Build a digest-only Symbol for a name."""

    def make(name: str) -> Symbol:
        return Symbol(oracle.digest(name.encode("ascii")))

    return make


@pytest.fixture
def inline(oracle: DigestOracle):
    """Build a Symbol that carries its text."""

    def make(name: str) -> Symbol:
        return Symbol(oracle.digest(name.encode("ascii")), name)

    return make
