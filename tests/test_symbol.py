"""Tests for Symbol construction and display."""

import pytest

from hashrecover.digest_oracle import DigestOracle
from hashrecover.errors import MalformedSymbolError
from hashrecover.symbol import DIGEST_SIZE, Symbol


def test_inline_symbol_displays_text() -> None:
    """Verify a symbol with text displays that text."""
    oracle = DigestOracle()
    s = Symbol(oracle.digest_of_string("Ring"), "Ring")
    assert str(s) == "Ring"
    assert not s.using_hash


def test_digest_only_symbol_displays_hex() -> None:
    """Verify a digest-only symbol falls back to lowercase hex."""
    s = Symbol(bytes(range(16)))
    assert s.using_hash
    assert s.hash_string() == "000102030405060708090a0b0c0d0e0f"
    assert str(s) == s.hash_string()


def test_from_hex_roundtrip() -> None:
    """Verify a hex digest parses into the same bytes."""
    hex_digest = "ff" * DIGEST_SIZE
    assert Symbol.from_hex(hex_digest).digest == b"\xff" * DIGEST_SIZE


@pytest.mark.parametrize("digest", [b"", b"\x00" * 15, b"\x00" * 20])
def test_wrong_width_fails_fast(digest: bytes) -> None:
    """Verify digests of the wrong width are rejected."""
    with pytest.raises(MalformedSymbolError):
        Symbol(digest)


def test_non_bytes_digest_fails_fast() -> None:
    """Verify a hex string passed as the digest is rejected."""
    with pytest.raises(MalformedSymbolError):
        Symbol("00" * DIGEST_SIZE)  # type: ignore[arg-type]


def test_invalid_hex_fails_fast() -> None:
    """Verify non-hex text is rejected by from_hex."""
    with pytest.raises(MalformedSymbolError):
        Symbol.from_hex("zz" * DIGEST_SIZE)


def test_bytearray_is_normalized() -> None:
    """Verify a bytearray digest is stored as hashable bytes."""
    s = Symbol(bytearray(DIGEST_SIZE))
    assert isinstance(s.digest, bytes)
    assert hash(s) == hash(Symbol(bytes(DIGEST_SIZE)))
