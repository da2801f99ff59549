"""Data models for entity instances and synthesized schemas."""

from dataclasses import dataclass, field

from hashrecover.symbol import Symbol
from hashrecover.variable_type import VariableType


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field of an entity type."""

    name: str
    type_tag: VariableType


@dataclass
class EntityTypeSchema:
    """The field layout captured from the first instance of an entity type."""

    display_name: str
    fields: list[FieldDescriptor] = field(default_factory=list)


@dataclass
class EntityInstance:
    """One object placed in a scene, as handed over by a scene reader."""

    entity: Symbol
    fields: list[tuple[Symbol, VariableType]] = field(default_factory=list)
    scene: str | None = None  # scene the instance was read from
