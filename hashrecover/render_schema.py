"""Rendering of entity schemas as decompilation-style C structs."""

from collections.abc import Iterable

from hashrecover.models import EntityTypeSchema
from hashrecover.render_type_name import render_type_name

DEFAULT_STRUCT_PREFIX = "Entity"
DEFAULT_BASE_MARKER = "RSDK_ENTITY"


def render_schema(
    schema: EntityTypeSchema,
    struct_prefix: str = DEFAULT_STRUCT_PREFIX,
    base_marker: str = DEFAULT_BASE_MARKER,
) -> str:
    """Render one schema as a struct block."""
    lines = [f"struct {struct_prefix}{schema.display_name} {{", f"\t{base_marker}"]
    lines.extend(
        f"\t{render_type_name(f.type_tag)} {f.name};" for f in schema.fields
    )
    lines.append("};")
    return "\n".join(lines)


def render_schemas(
    schemas: Iterable[EntityTypeSchema],
    struct_prefix: str = DEFAULT_STRUCT_PREFIX,
    base_marker: str = DEFAULT_BASE_MARKER,
) -> str:
    """Render all schemas, separated by blank lines."""
    blocks = [render_schema(s, struct_prefix, base_marker) for s in schemas]
    return "\n\n".join(blocks) + ("\n" if blocks else "")
