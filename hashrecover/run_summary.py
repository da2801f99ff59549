"""Data model for the final counts of a recovery run."""

from dataclasses import dataclass, field

from hashrecover.models import EntityTypeSchema


@dataclass
class RunSummary:
    """Counts and listings produced at the end of a recovery run."""

    entity_types: int
    field_names: int
    instances: int
    unresolved: list[str] = field(default_factory=list)
    schemas: list[EntityTypeSchema] = field(default_factory=list)

    @property
    def unresolved_count(self) -> int:
        """Number of distinct digests no candidate matched."""
        return len(self.unresolved)
