"""Data models for symbol resolution results."""

from dataclasses import dataclass
from enum import Enum

from hashrecover.symbol import Symbol


class ResolutionSource(Enum):
    """Where a symbol's display text came from."""

    INLINE = "inline"
    DICTIONARY = "dictionary"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolutionResult:
    """Represents the outcome of resolving one Symbol to a name."""

    symbol: Symbol
    resolved_text: str | None
    source: ResolutionSource

    @property
    def resolved(self) -> bool:
        """True unless no candidate matched the digest."""
        return self.source is not ResolutionSource.UNRESOLVED

    @property
    def display_name(self) -> str:
        """The resolved name, or the digest's hex fallback."""
        if self.resolved_text is not None:
            return self.resolved_text
        return self.symbol.hash_string()
