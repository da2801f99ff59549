"""Mapping from variable type tags to rendered struct member types."""

from hashrecover.variable_type import VariableType

TYPE_NAMES: dict[VariableType, str] = {
    VariableType.UINT8: "uint8",
    VariableType.UINT16: "uint16",
    VariableType.UINT32: "uint32",
    VariableType.INT8: "int8",
    VariableType.INT16: "int16",
    VariableType.INT32: "int32",
    # Enums are stored as plain integers.
    VariableType.ENUM: "int32",
    VariableType.BOOL: "bool32",
    VariableType.STRING: "String",
    VariableType.VECTOR2: "Vector2",
    VariableType.FLOAT: "float",
    VariableType.COLOR: "color",
}


def render_type_name(tag: VariableType) -> str:
    """Return the canonical type name used in struct output."""
    return TYPE_NAMES[tag]
