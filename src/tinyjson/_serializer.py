"""
Canonical serializer: Value tree to compact JSON text.

There is exactly one rendering per value. No whitespace is inserted, object
members appear in key order, and string contents are written verbatim
without re-escaping.
"""

import math
from typing import IO

from ._profile import ProfileContext
from ._value import Value
from ._value import ValueType


def _encode_string(s: str) -> str:
    return f'"{s}"'


def _encode_double(n: float) -> str:
    """Shortest repr that reads back as the same double."""
    if math.isnan(n) or math.isinf(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    return repr(n)


def _encode_array(value: Value) -> str:
    return "[" + ",".join(_encode_value(item) for item in value._array()) + "]"


def _encode_object(value: Value) -> str:
    members = [
        f"{_encode_string(key)}:{_encode_value(member)}"
        for key, member in value.items()
    ]
    return "{" + ",".join(members) + "}"


def _encode_value(value: Value) -> str:  # noqa: PLR0911
    """Encode any Value, recursing into containers."""
    value_type = value.type
    if value_type is ValueType.OBJECT:
        return _encode_object(value)
    elif value_type is ValueType.ARRAY:
        return _encode_array(value)
    elif value_type is ValueType.STRING:
        return _encode_string(value.get_string())
    elif value_type is ValueType.INTEGER:
        return str(value.get_integer())
    elif value_type is ValueType.DOUBLE:
        return _encode_double(value.get_double())
    elif value_type is ValueType.BOOLEAN:
        return "true" if value.get_bool() else "false"
    elif value_type is ValueType.NULL:
        return "null"
    else:
        raise RuntimeError(f"unexpected json type: {value.type_name}")


def to_string(value: Value) -> str:
    """Serializes a Value tree to canonical JSON text."""
    if not isinstance(value, Value):
        msg = f"Object of type {type(value).__name__} is not a Value"
        raise TypeError(msg)
    with ProfileContext("to_string"):
        return _encode_value(value)


def to_bytes(value: Value) -> bytes:
    """Serializes a Value tree to canonical UTF-8 encoded JSON."""
    return to_string(value).encode("utf-8")


def dump(value: Value, fp: IO[str]) -> None:
    """
    Serializes a Value tree to a text file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(to_string(value))
