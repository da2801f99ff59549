"""Tests for per-type schema capture and struct rendering."""

from hashrecover.models import EntityTypeSchema, FieldDescriptor
from hashrecover.render_schema import render_schema, render_schemas
from hashrecover.schema_synthesizer import SchemaSynthesizer
from hashrecover.variable_type import VariableType


def test_first_instance_wins() -> None:
    """Verify a second instance of a type does not change its schema."""
    synth = SchemaSynthesizer()
    assert synth.begin("Ring") is True
    synth.record_field("Ring", FieldDescriptor("type", VariableType.ENUM))
    synth.record_field("Ring", FieldDescriptor("planeFilter", VariableType.ENUM))
    synth.seal("Ring")

    assert synth.begin("Ring") is False
    synth.record_field("Ring", FieldDescriptor("extra", VariableType.BOOL))
    synth.seal("Ring")

    schemas = synth.finalize()
    assert len(schemas) == 1
    assert [f.name for f in schemas[0].fields] == ["type", "planeFilter"]


def test_base_fields_are_excluded_but_counted() -> None:
    """Verify inherited fields are tallied and left out of the schema."""
    synth = SchemaSynthesizer()
    synth.begin("Player")
    synth.record_field("Player", FieldDescriptor("angle", VariableType.ENUM))
    synth.record_field("Player", FieldDescriptor("position", VariableType.VECTOR2))
    synth.record_field("Player", FieldDescriptor("characterID", VariableType.ENUM))

    (schema,) = synth.finalize()
    assert [f.name for f in schema.fields] == ["characterID"]
    assert synth.base_field_hits == {"angle": 1, "position": 1}


def test_custom_base_fields() -> None:
    """Verify the base field set can be replaced."""
    synth = SchemaSynthesizer(base_fields=["speed"])
    synth.record_field("Spring", FieldDescriptor("angle", VariableType.ENUM))
    synth.record_field("Spring", FieldDescriptor("speed", VariableType.INT32))
    (schema,) = synth.finalize()
    assert [f.name for f in schema.fields] == ["angle"]


def test_encounter_order_and_empty_types() -> None:
    """Verify schemas keep encounter order, including types with no fields."""
    synth = SchemaSynthesizer()
    for key in ["B", "A", "B", "C"]:
        synth.begin(key)
        synth.seal(key)
    assert [s.display_name for s in synth.finalize()] == ["B", "A", "C"]
    assert "A" in synth


def test_render_schema() -> None:
    """Verify a schema renders as a struct with the base marker first."""
    schema = EntityTypeSchema(
        "Ring",
        [
            FieldDescriptor("type", VariableType.ENUM),
            FieldDescriptor("speed", VariableType.FLOAT),
        ],
    )
    assert render_schema(schema) == (
        "struct EntityRing {\n\tRSDK_ENTITY\n\tint32 type;\n\tfloat speed;\n};"
    )


def test_render_schemas_separates_blocks() -> None:
    """Verify multiple structs are separated by a blank line."""
    text = render_schemas(
        [EntityTypeSchema("A"), EntityTypeSchema("B")], "Obj", "BASE"
    )
    assert text == "struct ObjA {\n\tBASE\n};\n\nstruct ObjB {\n\tBASE\n};\n"
    assert render_schemas([]) == ""
