"""Ordered, deduplicated set of names tried against unknown digests."""

from collections.abc import Iterable, Iterator


class CandidateDictionary:
    """Insertion-ordered set of candidate names that only ever grows."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        """Initialize the dictionary, optionally seeding it with names."""
        # dict keys keep first-insertion order and give O(1) membership.
        self._names: dict[str, None] = {}
        self.add_all(names)

    def add(self, name: str) -> bool:
        """Add a single name. Returns False if it was already present."""
        if name in self._names:
            return False
        self._names[name] = None
        return True

    def add_all(self, names: Iterable[str]) -> int:
        """Merge names in order, skipping ones already present.

        Returns the number of names actually added.
        """
        added = 0
        for name in names:
            if self.add(name):
                added += 1
        return added

    def all(self) -> list[str]:
        """Return a snapshot of the names in scan order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)
