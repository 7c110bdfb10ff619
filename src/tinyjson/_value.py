"""
In-memory JSON value tree.

A ``Value`` is a tagged variant: a ``ValueType`` tag plus a native payload.
Containers own their children outright. Every insertion stores a deep copy
of what it is given, so the value graph is always a tree and copying a value
copies its whole subtree.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from enum import Enum
from typing import Any
from typing import TypeAlias

from ._errors import EncodingError
from ._errors import IndexOutOfRange
from ._errors import KeyNotFound
from ._errors import TypeMismatch

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Payload: TypeAlias = (
    "None | bool | int | float | str | list[Value] | dict[str, Value]"
)
# Plain Python data accepted wherever a Value is expected
PythonData: TypeAlias = (
    "None"
    " | bool"
    " | int"
    " | float"
    " | str"
    " | list[Any]"
    " | tuple[Any, ...]"
    " | dict[str, Any]"
    " | Value"
)


class ValueType(Enum):
    """
    Tag of a JSON value.

    ``INVALID`` is an internal sentinel; nothing public ever produces it.
    """

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    INVALID = "invalid"


_TYPE_NAMES = {
    ValueType.STRING: "string",
    ValueType.ARRAY: "array",
    ValueType.OBJECT: "object",
    ValueType.INTEGER: "number",
    ValueType.DOUBLE: "number",
    ValueType.BOOLEAN: "boolean",
    ValueType.NULL: "null",
    ValueType.INVALID: "invalid",
}


def _utf8_key(key: str) -> bytes:
    return key.encode("utf-8")


def _check_text(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(
            "String is not encodable as UTF-8", text, e.start
        ) from e
    return text


def _coerce(data: PythonData) -> Value:
    """Returns an owned Value for ``data``, copying existing Values."""
    if isinstance(data, Value):
        return data.copy()
    return Value.from_python(data)


class Value:
    """
    One node of a JSON value tree.

    ``Value()`` is null; the classmethods build each other variant. Object
    members enumerate in the byte order of their UTF-8 keys, whatever order
    they were inserted in.
    """

    __slots__ = ("_payload", "_type")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._type = ValueType.NULL
        self._payload: Payload = None

    @classmethod
    def _make(cls, value_type: ValueType, payload: Payload) -> Value:
        value = cls.__new__(cls)
        value._type = value_type
        value._payload = payload
        return value

    @classmethod
    def null(cls) -> Value:
        return cls()

    @classmethod
    def boolean(cls, flag: bool) -> Value:
        if not isinstance(flag, bool):
            msg = f"boolean value must be bool, not {type(flag).__name__}"
            raise TypeError(msg)
        return cls._make(ValueType.BOOLEAN, flag)

    @classmethod
    def integer(cls, number: int) -> Value:
        """Builds a 64-bit signed integer value."""
        if isinstance(number, bool) or not isinstance(number, int):
            msg = f"integer value must be int, not {type(number).__name__}"
            raise TypeError(msg)
        if not INT64_MIN <= number <= INT64_MAX:
            raise OverflowError(f"integer {number} does not fit in 64 bits")
        return cls._make(ValueType.INTEGER, number)

    @classmethod
    def double(cls, number: float) -> Value:
        if isinstance(number, bool) or not isinstance(number, int | float):
            msg = f"double value must be float, not {type(number).__name__}"
            raise TypeError(msg)
        return cls._make(ValueType.DOUBLE, float(number))

    @classmethod
    def string(cls, text: str) -> Value:
        if not isinstance(text, str):
            msg = f"string value must be str, not {type(text).__name__}"
            raise TypeError(msg)
        return cls._make(ValueType.STRING, _check_text(text))

    @classmethod
    def array(cls, elements: Iterable[PythonData] = ()) -> Value:
        return cls._make(ValueType.ARRAY, [_coerce(e) for e in elements])

    @classmethod
    def object(cls, members: Mapping[str, PythonData] | None = None) -> Value:
        value = cls._make(ValueType.OBJECT, {})
        for key, member in (members or {}).items():
            value.add_member(key, member)
        return value

    @classmethod
    def from_python(cls, data: PythonData) -> Value:
        """
        Converts plain Python data into a Value tree.

        ``bool`` maps to BOOLEAN, ``int`` to INTEGER and ``float`` to DOUBLE;
        lists and tuples become arrays and dicts become objects.
        """
        if isinstance(data, Value):
            return data.copy()
        if data is None:
            return cls()
        if isinstance(data, bool):
            return cls.boolean(data)
        if isinstance(data, int):
            return cls.integer(data)
        if isinstance(data, float):
            return cls.double(data)
        if isinstance(data, str):
            return cls.string(data)
        if isinstance(data, list | tuple):
            return cls.array(data)
        if isinstance(data, dict):
            return cls.object(data)
        msg = f"Object of type {type(data).__name__} is not JSON convertible"
        raise TypeError(msg)

    def to_python(self) -> Any:
        """Converts the tree back into plain Python data."""
        if self._type is ValueType.ARRAY:
            return [element.to_python() for element in self._array()]
        if self._type is ValueType.OBJECT:
            return {key: member.to_python() for key, member in self.items()}
        if self._type is ValueType.INVALID:
            raise RuntimeError("unexpected json type: invalid")
        return self._payload

    @property
    def type(self) -> ValueType:
        return self._type

    @property
    def type_name(self) -> str:
        return _TYPE_NAMES[self._type]

    def _require(self, expected: ValueType) -> None:
        if self._type is not expected:
            raise TypeMismatch(expected.value, self._type.value)

    def _array(self) -> list[Value]:
        self._require(ValueType.ARRAY)
        return self._payload  # type: ignore[return-value]

    def _members(self) -> dict[str, Value]:
        self._require(ValueType.OBJECT)
        return self._payload  # type: ignore[return-value]

    def get_string(self) -> str:
        self._require(ValueType.STRING)
        return self._payload  # type: ignore[return-value]

    def get_integer(self) -> int:
        self._require(ValueType.INTEGER)
        return self._payload  # type: ignore[return-value]

    def get_double(self) -> float:
        self._require(ValueType.DOUBLE)
        return self._payload  # type: ignore[return-value]

    def get_bool(self) -> bool:
        self._require(ValueType.BOOLEAN)
        return self._payload  # type: ignore[return-value]

    def get_null(self) -> None:
        self._require(ValueType.NULL)

    def get_object(self) -> dict[str, Value]:
        """Returns a deep copy of the members, in key order."""
        self._require(ValueType.OBJECT)
        return {key: member.copy() for key, member in self.items()}

    def get_array(self) -> list[Value]:
        """Returns a deep copy of the elements."""
        return [element.copy() for element in self._array()]

    def size(self) -> int:
        if self._type is ValueType.ARRAY or self._type is ValueType.OBJECT:
            return len(self._payload)  # type: ignore[arg-type]
        raise TypeMismatch("array or object", self._type.value)

    def has_member(self, key: str) -> bool:
        return key in self._members()

    def add_member(self, key: str, value: PythonData) -> None:
        """Inserts or overwrites member ``key`` with a copy of ``value``."""
        members = self._members()
        if not isinstance(key, str):
            msg = f"keys must be str, not {type(key).__name__}"
            raise TypeError(msg)
        members[_check_text(key)] = _coerce(value)

    def add_element(self, value: PythonData) -> None:
        """Appends a copy of ``value``."""
        self._array().append(_coerce(value))

    def _adopt_member(self, key: str, value: Value) -> None:
        """Stores a freshly built member without copying it."""
        self._members()[key] = value

    def _adopt_element(self, value: Value) -> None:
        self._array().append(value)

    def keys(self) -> list[str]:
        return sorted(self._members(), key=_utf8_key)

    def items(self) -> Iterator[tuple[str, Value]]:
        members = self._members()
        return iter([(key, members[key]) for key in self.keys()])

    def copy(self) -> Value:
        """Deep-copies this value and everything it owns."""
        if self._type is ValueType.ARRAY:
            payload: Payload = [element.copy() for element in self._array()]
        elif self._type is ValueType.OBJECT:
            payload = {k: v.copy() for k, v in self._members().items()}
        elif self._type is ValueType.INVALID:
            raise RuntimeError("unexpected json type: invalid")
        else:
            payload = self._payload
        return self._make(self._type, payload)

    def __copy__(self) -> Value:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Value:
        return self.copy()

    def __getitem__(self, key: str | int) -> Value:
        if isinstance(key, str):
            members = self._members()
            if key not in members:
                raise KeyNotFound(key)
            return members[key]
        if isinstance(key, int) and not isinstance(key, bool):
            elements = self._array()
            if key < 0 or key >= len(elements):
                raise IndexOutOfRange(key, len(elements))
            return elements[key]
        msg = f"Value indices must be str or int, not {type(key).__name__}"
        raise TypeError(msg)

    def __contains__(self, key: str) -> bool:
        return self.has_member(key)

    def __len__(self) -> int:
        return self.size()

    def __int__(self) -> int:
        return self.get_integer()

    def __float__(self) -> float:
        return self.get_double()

    def __str__(self) -> str:
        """The text of a STRING; other values fall back to ``repr``."""
        if self._type is ValueType.STRING:
            return self._payload  # type: ignore[return-value]
        return repr(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._type is not other._type or self._type is ValueType.INVALID:
            return False
        return self._payload == other._payload

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        if self._type is ValueType.OBJECT:
            payload = dict(self.items())
            return f"Value.object({payload!r})"
        if self._type is ValueType.NULL:
            return "Value.null()"
        return f"Value.{self._type.name.lower()}({self._payload!r})"
