"""
Small, dependency-free JSON value model, parser and serializer.

Parses UTF-8 text into a tree of ``Value`` nodes, gives typed access to the
tree, and writes it back as canonical compact JSON.

    >>> doc = tinyjson.parse('{"name": "Ada", "age": 36}')
    >>> doc["age"].get_integer()
    36
    >>> tinyjson.to_string(doc)
    '{"age":36,"name":"Ada"}'
"""

from typing import IO

from ._errors import DepthLimitExceeded
from ._errors import EncodingError
from ._errors import IndexOutOfRange
from ._errors import InvalidEscape
from ._errors import InvalidLiteral
from ._errors import KeyNotFound
from ._errors import NumberFormatError
from ._errors import ParseError
from ._errors import TinyJsonError
from ._errors import TrailingDataError
from ._errors import TypeMismatch
from ._errors import UnexpectedCharacter
from ._parser import JsonParser
from ._parser import ParseConfig
from ._parser import parse
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._profile import log_hot_path_stats
from ._serializer import dump
from ._serializer import to_bytes
from ._serializer import to_string
from ._stream import CodepointStream
from ._value import Value
from ._value import ValueType

__version__ = "0.1.0"


def load(fp: IO[str] | IO[bytes], **kwargs: object) -> Value:
    """
    Parses a JSON document from a text or binary file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "CodepointStream",
    "DepthLimitExceeded",
    "EncodingError",
    "HotPathStats",
    "IndexOutOfRange",
    "InvalidEscape",
    "InvalidLiteral",
    "JsonParser",
    "KeyNotFound",
    "NumberFormatError",
    "ParseConfig",
    "ParseError",
    "TinyJsonError",
    "TrailingDataError",
    "TypeMismatch",
    "UnexpectedCharacter",
    "Value",
    "ValueType",
    "clear_hot_path_stats",
    "dump",
    "get_hot_path_stats",
    "load",
    "log_hot_path_stats",
    "parse",
    "to_bytes",
    "to_string",
]
