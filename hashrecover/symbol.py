"""Name references that are either inline text or digest-only."""

from dataclasses import dataclass

from hashrecover.errors import MalformedSymbolError

DIGEST_SIZE = 16


@dataclass(frozen=True)
class Symbol:
    """A stored name: always a digest, optionally with the original text."""

    digest: bytes
    text: str | None = None

    def __post_init__(self) -> None:
        """Reject digests that could never compare equal to an oracle digest."""
        if not isinstance(self.digest, bytes | bytearray):
            msg = f"Symbol digest must be bytes, got {type(self.digest).__name__}"
            raise MalformedSymbolError(msg)
        if len(self.digest) != DIGEST_SIZE:
            msg = (
                f"Symbol digest must be {DIGEST_SIZE} bytes, "
                f"got {len(self.digest)}"
            )
            raise MalformedSymbolError(msg)
        if self.text is not None and not isinstance(self.text, str):
            msg = f"Symbol text must be str or None, got {type(self.text).__name__}"
            raise MalformedSymbolError(msg)
        # Normalize bytearray so Symbols stay hashable.
        object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def from_hex(cls, hex_digest: str) -> "Symbol":
        """Build a digest-only Symbol from its hexadecimal form."""
        try:
            raw = bytes.fromhex(hex_digest)
        except ValueError as e:
            msg = f"Invalid hexadecimal digest: {hex_digest!r}"
            raise MalformedSymbolError(msg) from e
        return cls(raw)

    @property
    def using_hash(self) -> bool:
        """True when only the digest is known."""
        return self.text is None

    def hash_string(self) -> str:
        """Stable fallback display string for the digest."""
        return self.digest.hex()

    def __str__(self) -> str:
        return self.text if self.text is not None else self.hash_string()
