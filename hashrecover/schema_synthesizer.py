"""Logic for collecting one field layout per distinct entity type."""

from collections import Counter
from collections.abc import Iterable

from hashrecover.base_fields import DEFAULT_BASE_FIELDS
from hashrecover.models import EntityTypeSchema, FieldDescriptor


class SchemaSynthesizer:
    """Builds a schema from the first instance of each entity type.

    Fields named after base entity fields are tallied in ``base_field_hits``
    but left out of the schema, since every type inherits them.
    """

    def __init__(self, base_fields: Iterable[str] = DEFAULT_BASE_FIELDS) -> None:
        """Initialize the synthesizer with the set of inherited field names."""
        self.base_fields = frozenset(base_fields)
        self._schemas: dict[str, EntityTypeSchema] = {}
        self._sealed: set[str] = set()
        self.base_field_hits: Counter[str] = Counter()

    def __contains__(self, entity_key: object) -> bool:
        return entity_key in self._schemas

    def begin(self, entity_key: str) -> bool:
        """Open capture for an entity type. False if the type was seen before."""
        if entity_key in self._schemas:
            return False
        self._schemas[entity_key] = EntityTypeSchema(entity_key)
        return True

    def record_field(self, entity_key: str, field: FieldDescriptor) -> None:
        """Record a field of the instance currently being captured."""
        if entity_key in self._sealed:
            return
        schema = self._schemas.get(entity_key)
        if schema is None:
            schema = self._schemas[entity_key] = EntityTypeSchema(entity_key)

        if field.name in self.base_fields:
            self.base_field_hits[field.name] += 1
            return
        schema.fields.append(field)

    def seal(self, entity_key: str) -> None:
        """Close capture; later instances of the type leave it unchanged."""
        self._sealed.add(entity_key)

    def finalize(self) -> list[EntityTypeSchema]:
        """Return every schema in first-encounter order."""
        self._sealed.update(self._schemas)
        return list(self._schemas.values())
