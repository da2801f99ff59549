"""MD5 digests of candidate names, memoized per oracle instance."""

import hashlib
import threading


class DigestOracle:
    """Computes name digests and caches them by the original string.

    The cache is a dict keyed by the string itself: lookups use the string's
    hash as the bucket key and confirm equality on hit, so two names sharing a
    hash value can never receive each other's digest.
    """

    def __init__(self, encoding: str = "ascii") -> None:
        """Initialize an empty cache for the given text encoding."""
        self.encoding = encoding
        self._cache: dict[str, bytes] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def digest(data: bytes) -> bytes:
        """Return the raw MD5 digest of a byte sequence."""
        return hashlib.md5(data).digest()  # noqa: S324

    def encode(self, text: str) -> bytes:
        """Encode a name the way the asset format does before hashing."""
        return text.encode(self.encoding, errors="replace")

    def digest_of_string(self, text: str) -> bytes:
        """Return the digest of a name, computing it at most once."""
        cached = self._cache.get(text)
        if cached is not None:
            with self._lock:
                self.hits += 1
            return cached

        value = self.digest(self.encode(text))
        with self._lock:
            # Another thread may have raced us; the value is the same either way.
            self._cache.setdefault(text, value)
            self.misses += 1
        return value

    def __len__(self) -> int:
        return len(self._cache)

