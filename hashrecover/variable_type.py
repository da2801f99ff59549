"""The closed set of editable variable types stored in scene files."""

from enum import IntEnum


class VariableType(IntEnum):
    """Variable type tags, numbered in their on-disk order."""

    UINT8 = 0
    UINT16 = 1
    UINT32 = 2
    INT8 = 3
    INT16 = 4
    INT32 = 5
    ENUM = 6
    BOOL = 7
    STRING = 8
    VECTOR2 = 9
    FLOAT = 10
    COLOR = 11

    @classmethod
    def parse(cls, value: "str | int | VariableType") -> "VariableType":
        """Accept a member, its integer code, or its name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if value in cls._value2member_map_:
                return cls(value)
        elif isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        msg = f"Unknown variable type: {value!r}"
        raise ValueError(msg)
