"""Logic for recovering the text behind digest-only symbols."""

import concurrent.futures
import logging
import threading
from collections.abc import Iterable

from hashrecover.candidate_dictionary import CandidateDictionary
from hashrecover.digest_oracle import DigestOracle
from hashrecover.resolution_result import ResolutionResult, ResolutionSource
from hashrecover.symbol import Symbol

logger = logging.getLogger(__name__)


class SymbolResolver:
    """Matches stored digests against the digests of candidate names.

    Candidates are hashed in dictionary order and folded into a digest index
    that keeps the first name seen for each digest. Because the dictionary only
    grows by appending, looking a digest up in the index gives the same answer
    as scanning the dictionary front to back and stopping at the first match,
    while hashing every candidate only once.
    """

    def __init__(self, dictionary: CandidateDictionary, oracle: DigestOracle) -> None:
        """Initialize the resolver over a dictionary and a digest oracle."""
        self.dictionary = dictionary
        self.oracle = oracle
        self._index: dict[bytes, str] = {}
        self._indexed = 0
        self._lock = threading.Lock()
        self.lookups = 0

    def resolve(self, symbol: Symbol) -> ResolutionResult:
        """Resolve one Symbol to its display text."""
        if symbol.text is not None:
            return ResolutionResult(symbol, symbol.text, ResolutionSource.INLINE)

        self._scan_new_candidates()
        name = self._index.get(symbol.digest)
        with self._lock:
            self.lookups += 1
        if name is None:
            return ResolutionResult(symbol, None, ResolutionSource.UNRESOLVED)
        return ResolutionResult(symbol, name, ResolutionSource.DICTIONARY)

    def resolve_many(
        self, symbols: Iterable[Symbol], workers: int = 1
    ) -> list[ResolutionResult]:
        """Resolve symbols in order, optionally across a thread pool.

        The dictionary must not be modified while this runs.
        """
        symbols = list(symbols)
        self._scan_new_candidates()
        if workers <= 1 or len(symbols) < 2:  # noqa: PLR2004
            return [self.resolve(s) for s in symbols]

        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.resolve, symbols))

    def _scan_new_candidates(self) -> None:
        """Hash candidates added since the last scan, in dictionary order."""
        if self._indexed == len(self.dictionary):
            return
        with self._lock:
            names = self.dictionary.all()
            for name in names[self._indexed :]:
                digest = self.oracle.digest_of_string(name)
                first = self._index.setdefault(digest, name)
                if first != name:
                    # First match wins; a real collision is reported, not resolved.
                    logger.warning(
                        "Digest collision: %r and %r both hash to %s; keeping %r",
                        first,
                        name,
                        digest.hex(),
                        first,
                    )
            self._indexed = len(names)
